import time
from typing import Any, Callable, Dict, Mapping, Sequence

import jwt
from jwt.exceptions import (
    DecodeError,
    InvalidAlgorithmError,
    InvalidSignatureError as JWTInvalidSignatureError,
    PyJWTError,
)

from ...config.settings import HmacSettings
from ...domain.constants import ALGORITHM, TOKEN_TYPE
from ...domain.entities import ClaimSet
from ...domain.exceptions import (
    ExpiredTokenError,
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    SigningError,
    UnexpectedAlgorithmError,
)
from ...domain.ports import TokenSigner, TokenVerifier
from ...domain.value_objects import Scopes

Clock = Callable[[], float]

# PyJWT checks the signature and the algorithm allow-list only; time and
# claim checks run on the typed ClaimSet.
_DECODE_OPTIONS: Dict[str, Any] = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


class HS256Signer(TokenSigner):
    """
    Adapter implementing TokenSigner port using PyJWT.

    Every token gets the header {"alg": "HS256", "typ": "JWT"} and the
    claims usr, iss, iat, exp and scopes.
    """

    def __init__(self, settings: HmacSettings, clock: Clock = time.time) -> None:
        self._key = settings.signing_key
        self._issuer = settings.issuer
        self._expiry_seconds = settings.expiry_seconds
        self._clock = clock

    def build_claims(self, user_id: str, scopes: Sequence[str]) -> ClaimSet:
        now = self._clock()
        return ClaimSet(
            subject=user_id,
            issuer=self._issuer,
            issued_at=int(now),
            expires_at=int(now + self._expiry_seconds),
            scopes=Scopes(scopes),
        )

    def sign(self, user_id: str, scopes: Sequence[str]) -> str:
        """
        Sign a fresh claim set for `user_id`.

        Raises:
            SigningError
        """
        claims = self.build_claims(user_id, scopes)
        try:
            return jwt.encode(
                claims.to_claims(),
                self._key,
                algorithm=ALGORITHM,
                headers={"typ": TOKEN_TYPE},
            )
        except (TypeError, ValueError, PyJWTError) as exc:
            raise SigningError(f"Unable to sign token: {exc}") from exc


class HS256Verifier(TokenVerifier):
    """
    Adapter implementing TokenVerifier port using PyJWT.

    The accepted algorithm is the module constant ALGORITHM and nothing
    else; there is no way to pass a different allow-list in.
    """

    def __init__(self, settings: HmacSettings, clock: Clock = time.time) -> None:
        self._key = settings.signing_key
        self._clock = clock

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def verify(self, token: str) -> ClaimSet:
        """
        Decode and validate a token.

        Returns:
            The typed ClaimSet.

        Raises:
            MalformedTokenError
            UnexpectedAlgorithmError
            InvalidSignatureError
            ExpiredTokenError
            ClaimShapeError
            InvalidTokenError
        """
        header = self._parse_header(token)

        alg = header.get("alg")
        if alg != ALGORITHM:
            raise UnexpectedAlgorithmError(f"unexpected signing method: {alg!r}")

        payload = self._verified_payload(token)
        claims = ClaimSet.from_claims(payload)

        if self._clock() >= claims.expires_at:
            raise ExpiredTokenError("Token has expired")

        return claims

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _parse_header(token: Any) -> Mapping[str, Any]:
        if not isinstance(token, str):
            raise MalformedTokenError(f"Invalid token type: {type(token).__name__}")
        if token.count(".") != 2:
            raise MalformedTokenError("Token must have exactly three segments")
        if not token.isascii():
            raise MalformedTokenError("Token must be base64url text")

        try:
            return jwt.get_unverified_header(token)
        except DecodeError as exc:
            raise MalformedTokenError(f"Malformed token: {exc}") from exc
        except PyJWTError as exc:
            raise InvalidTokenError(f"Invalid token header: {exc}") from exc

    def _verified_payload(self, token: str) -> Mapping[str, Any]:
        try:
            return jwt.decode(
                token,
                self._key,
                algorithms=[ALGORITHM],
                options=_DECODE_OPTIONS,
            )
        except InvalidAlgorithmError as exc:
            raise UnexpectedAlgorithmError(f"unexpected signing method: {exc}") from exc
        except JWTInvalidSignatureError as exc:
            raise InvalidSignatureError("Signature verification failed") from exc
        except DecodeError as exc:
            raise MalformedTokenError(f"Malformed token: {exc}") from exc
        except PyJWTError as exc:
            raise InvalidTokenError(f"Invalid token: {exc}") from exc

