from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Plug into dependencies to get the bearer scheme in the OpenAPI schema
bearer_scheme = HTTPBearer(auto_error=False)

DEFAULT_COOKIE_NAME = "access_token"


def _bearer_from_header(value: str | None) -> str | None:
    if not value:
        return None
    scheme, _, credentials = value.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


def extract_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> str:
    """
    Find the access token for this request, in order:

      1. credentials resolved by `bearer_scheme`
      2. the raw `Authorization: Bearer ...` header
      3. the `cookie_name` cookie

    Raises HTTPException(401) if none carries a token.
    """
    if credentials is not None and (credentials.credentials or "").strip():
        return credentials.credentials.strip()

    token = _bearer_from_header(request.headers.get("Authorization"))
    if token:
        return token

    token = request.cookies.get(cookie_name)
    if token:
        return token

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
