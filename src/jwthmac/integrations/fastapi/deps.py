from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..common.auth_factory import AuthDependencies
from ...domain.entities import AccessContext
from ...domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExpiredTokenError,
)

logger = logging.getLogger("jwthmac.integrations.fastapi")

# A missing or non-Bearer Authorization header resolves to None.
bearer_scheme = HTTPBearer(auto_error=False)

DEFAULT_COOKIE_NAME = "access_token"


@dataclass(slots=True)
class FastAPIAuthorization:
    """
    FastAPI integration for jwthmac, built on top of the framework-agnostic
    AuthDependencies facade.
    """

    auth: AuthDependencies
    cookie_name: str = DEFAULT_COOKIE_NAME

    def _token_from(
            self,
            request: Request,
            credentials: Optional[HTTPAuthorizationCredentials],
    ) -> Optional[str]:
        """The bearer credential if one was sent, else the token cookie."""
        if credentials is not None and credentials.credentials.strip():
            return credentials.credentials.strip()
        return request.cookies.get(self.cookie_name) or None

    # ------------------------------------------------------------------ #
    # Base dependencies
    # ------------------------------------------------------------------ #

    async def get_current_user(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> AccessContext:
        """Dependency: Require authentication."""
        token = self._token_from(request, credentials)
        if token is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not authenticated",
                headers={"WWW-Authenticate": "Bearer"},
            )
        try:
            return self.auth.authenticate(token)
        except ExpiredTokenError as exc:
            logger.debug("Rejected expired token")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token expired",
            ) from exc
        except AuthenticationError as exc:
            logger.debug("Rejected token: %s (%s)", exc, type(exc).__name__)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(exc),
            ) from exc

    async def get_optional_user(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> AccessContext | None:
        """Dependency: Optional authentication."""
        token = self._token_from(request, credentials)
        if token is None:
            return None

        try:
            return self.auth.authenticate(token)
        except AuthenticationError as exc:
            logger.debug("Treating request as anonymous: %s", exc)
            return None

    # ------------------------------------------------------------------ #
    # Authorization dependency factories
    # ------------------------------------------------------------------ #

    def require_scopes(self, *scopes: str, any_of: bool = True) -> Callable:
        """
        Dependency factory: require any (or, with any_of=False, all) of the
        given scopes.
        """

        async def dependency(
                ctx: AccessContext = Depends(self.get_current_user),
        ) -> AccessContext:
            if any_of:
                requirement = self.auth.require_scopes(any_of=scopes)
            else:
                requirement = self.auth.require_scopes(all_of=scopes)
            try:
                return self.auth.authorize(ctx, [requirement])
            except AuthorizationError as exc:
                logger.debug("Denied %s: %s", ctx.user_id, exc)
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                    detail=str(exc)) from exc

        return dependency
