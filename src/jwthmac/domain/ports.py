from __future__ import annotations

from typing import Protocol, Sequence

from .entities import ClaimSet


class TokenSigner(Protocol):
    """
    Port for turning a subject and its scopes into a signed token.
    """

    def sign(self, user_id: str, scopes: Sequence[str]) -> str:
        """
        Raises:
          - SigningError
        """
        ...


class TokenVerifier(Protocol):
    """
    Port for decoding an access token into a typed claim set.

    Implementations live in the adapters layer (e.g. the PyJWT HS256 verifier).
    """

    def verify(self, token: str) -> ClaimSet:
        """
        Decode and verify the given token.

        Should:
          - pin the signing algorithm
          - verify signature
          - check expiry and claim shapes
        Raises:
          - ExpiredTokenError
          - InvalidTokenError (or one of its subclasses)
        """
        ...
