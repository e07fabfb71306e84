from __future__ import annotations

from .deps import FastAPIAuthorization
from .security import bearer_scheme, extract_token_from_request
from ..common.auth_factory import create_token_auth, create_token_auth_from_maker, TokenAuth
from ...domain.ports import TokenMaker
from ...tools.settings import TokenSettings


def create_fastapi_auth(
    *,
    settings: TokenSettings | None = None,
    token_maker: TokenMaker | None = None,
) -> FastAPIAuthorization:
    """
    High-level helper for FastAPI apps:

    - Creates TokenAuth from settings (or wraps an existing TokenMaker)
    - Wraps it in FastAPIAuthorization, exposing dependencies like:

        fastapi_auth.get_current_user
        fastapi_auth.get_optional_user
        fastapi_auth.require_roles(...)
    """
    if token_maker is not None:
        auth: TokenAuth = create_token_auth_from_maker(token_maker)
    elif settings is not None:
        auth = create_token_auth(settings)
    else:
        raise ValueError("Either settings or token_maker is required")
    return FastAPIAuthorization(auth=auth)


__all__ = [
    "FastAPIAuthorization",
    "bearer_scheme",
    "extract_token_from_request",
    "create_fastapi_auth",
]
