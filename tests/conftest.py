import base64
import hashlib
import hmac
import json

import pytest

from jwthmac.config.settings import HmacSettings

# PyJWT warns on HMAC keys shorter than the SHA-256 digest (32 bytes)
SIGNING_KEY = "test-signing-key-for-hs256-01234"


@pytest.fixture
def settings() -> HmacSettings:
    return HmacSettings(signing_key=SIGNING_KEY, issuer="svc-a", expiry_ms=60000)


def _b64(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def forge(header, payload, key: bytes, digest=hashlib.sha256) -> str:
    """Build a token by hand so tests control every byte of it."""
    signing_input = ".".join(
        _b64(json.dumps(part, separators=(",", ":")).encode())
        for part in (header, payload)
    )
    sig = hmac.new(key, signing_input.encode(), digest).digest()
    return f"{signing_input}.{_b64(sig)}"


@pytest.fixture
def forge_token():
    return forge
