"""
jwthmac.config

- HmacSettings: signing key, issuer and expiry for the HS256 codec.
- settings_from_env: convenience loader for env-driven services and the CLI.
"""

from __future__ import annotations

from .env import settings_from_env, DEFAULT_EXPIRY_MS
from .settings import HmacSettings

__all__ = [
    "HmacSettings",
    "settings_from_env",
    "DEFAULT_EXPIRY_MS",
]
