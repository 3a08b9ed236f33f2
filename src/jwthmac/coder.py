"""
Function-level entry points to the HS256 codec.

    token = encode(settings, "user-42", ["read", "write"])
    scopes, user_id = decode(settings, token)

Both are pure functions of their arguments and the wall clock; every
failure surfaces as an exception from `jwthmac.domain.exceptions`.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .adapters.pyjwt.hs256 import HS256Signer, HS256Verifier
from .config.settings import HmacSettings


def encode(settings: HmacSettings, user_id: str, scopes: Sequence[str]) -> str:
    """
    Sign `user_id` and `scopes` into a token valid for `settings.expiry_ms`.

    Raises:
        SigningError
    """
    return HS256Signer(settings).sign(user_id, scopes)


def decode(settings: HmacSettings, token: str) -> Tuple[List[str], str]:
    """
    Verify `token` and return `(scopes, user_id)`.

    Raises:
        MalformedTokenError
        UnexpectedAlgorithmError
        InvalidSignatureError
        ExpiredTokenError
        ClaimShapeError
        InvalidTokenError
    """
    claims = HS256Verifier(settings).verify(token)
    return list(claims.scopes), claims.subject
