from __future__ import annotations

import os

from .settings import HmacSettings

DEFAULT_EXPIRY_MS = 60 * 60 * 1000


def settings_from_env() -> HmacSettings:
    def _positive_int(key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError as exc:
            raise RuntimeError(f"{key} must be an integer, got {raw!r}") from exc
        if value <= 0:
            raise RuntimeError(f"{key} must be positive, got {value}")
        return value

    signing_key = os.getenv("JWT_SIGNING_KEY")
    issuer = os.getenv("JWT_ISSUER")
    if not all([signing_key, issuer]):
        missing = [
            n
            for n, v in [
                ("JWT_SIGNING_KEY", signing_key),
                ("JWT_ISSUER", issuer),
            ]
            if not v
        ]
        raise RuntimeError(f"Missing JWT settings: {', '.join(missing)}")

    return HmacSettings(
        signing_key=signing_key,
        issuer=issuer,
        expiry_ms=_positive_int("JWT_EXPIRY_MS", DEFAULT_EXPIRY_MS),
    )
