from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .constants import Claim
from .exceptions import ClaimShapeError
from .value_objects import Scopes, Subject


def _require_str(claims: Mapping[str, Any], claim: Claim) -> str:
    value = claims.get(claim.value)
    if not isinstance(value, str):
        raise ClaimShapeError(f"unable to parse claim {claim.value!r}: expected a string")
    return value


def _require_int(claims: Mapping[str, Any], claim: Claim) -> int:
    value = claims.get(claim.value)
    # bool is an int subclass; JSON true/false is never a timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise ClaimShapeError(f"unable to parse claim {claim.value!r}: expected an integer")
    return value


def _require_scopes(claims: Mapping[str, Any]) -> Scopes:
    raw = claims.get(Claim.SCOPES.value)
    if not isinstance(raw, list):
        raise ClaimShapeError("unable to parse scopes: expected a list of strings")
    for name in raw:
        if not isinstance(name, str):
            raise ClaimShapeError(f"unable to parse scope name: {name!r}")
    return Scopes(raw)


@dataclass(frozen=True, slots=True)
class ClaimSet:
    """
    The fixed set of claims carried by every token.

    `from_claims` is the only way untrusted payloads become a ClaimSet: it
    checks presence and type of every field in one pass and fails closed.
    """
    subject: str
    issuer: str
    issued_at: int
    expires_at: int
    scopes: Scopes = field(default_factory=Scopes)

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "ClaimSet":
        """
        Raises:
            ClaimShapeError if any claim is absent or has the wrong type.
        """
        return cls(
            subject=_require_str(claims, Claim.SUBJECT),
            issuer=_require_str(claims, Claim.ISSUER),
            issued_at=_require_int(claims, Claim.ISSUED_AT),
            expires_at=_require_int(claims, Claim.EXPIRES_AT),
            scopes=_require_scopes(claims),
        )

    def to_claims(self) -> Dict[str, Any]:
        return {
            Claim.SUBJECT.value: self.subject,
            Claim.ISSUER.value: self.issuer,
            Claim.ISSUED_AT.value: self.issued_at,
            Claim.EXPIRES_AT.value: self.expires_at,
            Claim.SCOPES.value: list(self.scopes),
        }


@dataclass(slots=True)
class AccessContext:
    """
    What an authenticated request knows about its caller.

    This package does NOT interpret the business meaning of scopes.
    """
    subject: Subject
    scopes: Scopes = field(default_factory=Scopes)
    issuer: Optional[str] = None
    issued_at: Optional[int] = None
    expires_at: Optional[int] = None

    @classmethod
    def from_claim_set(cls, claims: ClaimSet) -> "AccessContext":
        return cls(
            subject=Subject(claims.subject),
            scopes=claims.scopes,
            issuer=claims.issuer,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )

    # --- Read-only shortcuts ----------------------------------------------

    @property
    def user_id(self) -> str:
        return str(self.subject)

    def has_scope(self, scope: str) -> bool:
        return scope in self.scopes
