from __future__ import annotations

from dataclasses import dataclass

from ...domain.entities import AccessContext
from ...domain.exceptions import AuthenticationError
from ...domain.ports import TokenVerifier


@dataclass(slots=True)
class AuthenticateTokenUseCase:
    """
    Application use case:
    - Verify a token via TokenVerifier port
    - Map the typed ClaimSet -> AccessContext

    Framework-agnostic.
    """

    token_verifier: TokenVerifier

    def execute(self, token: str) -> AccessContext:
        """
        Authenticate a token and return an AccessContext.

        Raises:
            ExpiredTokenError
            InvalidTokenError (and its subclasses)
            AuthenticationError
        """
        try:
            claims = self.token_verifier.verify(token)
        except AuthenticationError:
            # let callers distinguish these explicitly
            raise
        except Exception as exc:
            # Wrap unexpected errors in a generic AuthenticationError
            raise AuthenticationError(f"Token validation failed: {exc}") from exc

        return AccessContext.from_claim_set(claims)
