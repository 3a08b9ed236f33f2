from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class HmacSettings:
    """
    Shared-secret signing settings.

    Host code decides how to construct this (env, config file, etc.).
    The codec does not validate it: an empty key or a non-positive expiry
    is the caller's problem.
    """
    signing_key: bytes = field(repr=False)
    issuer: str
    expiry_ms: int

    def __init__(self, signing_key: Union[bytes, str], issuer: str, expiry_ms: int) -> None:
        if isinstance(signing_key, str):
            signing_key = signing_key.encode("utf-8")
        object.__setattr__(self, "signing_key", signing_key)
        object.__setattr__(self, "issuer", issuer)
        object.__setattr__(self, "expiry_ms", expiry_ms)

    @property
    def expiry_seconds(self) -> float:
        return self.expiry_ms / 1000
