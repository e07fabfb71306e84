from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPAuthorizationCredentials

from .security import bearer_scheme, extract_token_from_request
from ..common.auth_factory import TokenAuth
from ...domain.exceptions import (
    TokenExpiredError,
    InvalidTokenError,
    AuthenticationError,
    AuthorizationError,
)
from ...domain.payload import Payload


@dataclass(slots=True)
class FastAPIAuthorization:
    """
    FastAPI integration for pkg_token, built on top of the
    framework-agnostic TokenAuth facade.

    Usage:

        fastapi_auth = create_fastapi_auth(settings=settings_from_env())

        @app.get("/me")
        async def me(user: Payload = Depends(fastapi_auth.get_current_user)):
            return {"username": user.username}

        @app.delete("/users/{name}")
        async def delete_user(
            name: str,
            user: Payload = Depends(fastapi_auth.require_roles("admin")),
        ):
            ...
    """

    auth: TokenAuth

    # ------------------------------------------------------------------ #
    # Base dependencies
    # ------------------------------------------------------------------ #

    async def get_current_user(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Payload:
        """Dependency: Require a valid, unexpired token."""
        token = extract_token_from_request(request, credentials)
        try:
            return self.auth.authenticate(token)
        except TokenExpiredError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token expired",
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc
        except (InvalidTokenError, AuthenticationError) as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token",
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc

    async def get_optional_user(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Payload | None:
        """Dependency: Optional authentication."""
        try:
            token = extract_token_from_request(request, credentials)
        except HTTPException:
            # no token anywhere -> anonymous
            return None

        try:
            return self.auth.authenticate(token)
        except AuthenticationError:
            # bad or expired token -> anonymous
            return None

    # ------------------------------------------------------------------ #
    # Authorization dependency factories
    # ------------------------------------------------------------------ #

    def require_roles(self, *roles: str) -> Callable:
        """
        Dependency factory: require the token role to be one of `roles`.
        """
        requirement = self.auth.require_roles(*roles)

        async def dependency(
                user: Payload = Depends(self.get_current_user),
        ) -> Payload:
            try:
                return self.auth.authorize(user, [requirement])
            except AuthorizationError as exc:
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                    detail=str(exc)) from exc

        return dependency
