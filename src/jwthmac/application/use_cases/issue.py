from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...domain.ports import TokenSigner


@dataclass(slots=True)
class IssueTokenUseCase:
    """
    Application use case: sign a token for an already verified user.

    `user_id` is not validated here; the caller is the one who vouches for it.
    """

    token_signer: TokenSigner

    def execute(self, user_id: str, scopes: Sequence[str] = ()) -> str:
        """
        Raises:
            SigningError
        """
        return self.token_signer.sign(user_id, scopes)
