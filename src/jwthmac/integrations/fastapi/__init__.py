"""

from fastapi import Depends
from jwthmac.config import settings_from_env
from jwthmac.integrations.fastapi import create_fastapi_auth

fastapi_auth = create_fastapi_auth(settings_from_env())

get_current_user = fastapi_auth.get_current_user
get_optional_user = fastapi_auth.get_optional_user
require_scopes = fastapi_auth.require_scopes

@app.get("/reports")
async def reports(ctx=Depends(require_scopes("reports:read"))):
    ...

"""
from __future__ import annotations

from .deps import FastAPIAuthorization, bearer_scheme, DEFAULT_COOKIE_NAME
from ..common.auth_factory import create_auth_dependencies, AuthDependencies
from ...config.settings import HmacSettings


def create_fastapi_auth(
    settings: HmacSettings,
    *,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> FastAPIAuthorization:
    """
    High-level helper for FastAPI apps:

    - Creates AuthDependencies from HmacSettings
    - Wraps them in FastAPIAuthorization (reading the token from the
      bearer header, else from `cookie_name`), exposing dependencies like:

        fastapi_auth.get_current_user
        fastapi_auth.get_optional_user
        fastapi_auth.require_scopes(...)
    """
    auth: AuthDependencies = create_auth_dependencies(settings)
    return FastAPIAuthorization(auth=auth, cookie_name=cookie_name)


__all__ = [
    "FastAPIAuthorization",
    "create_fastapi_auth",
    "bearer_scheme",
    "DEFAULT_COOKIE_NAME",
]
