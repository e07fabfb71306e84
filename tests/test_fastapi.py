# tests/test_fastapi.py
from datetime import timedelta

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from pkg_token import Payload, TokenSettings, TokenType
from pkg_token.integrations.fastapi import create_fastapi_auth


@pytest.fixture(params=list(TokenType), ids=lambda t: t.value)
def fastapi_auth(request, secret):
    return create_fastapi_auth(
        settings=TokenSettings(symmetric_key=secret, token_type=request.param)
    )


@pytest.fixture
def client(fastapi_auth):
    app = FastAPI()

    @app.get("/me")
    async def me(user: Payload = Depends(fastapi_auth.get_current_user)):
        return {"username": user.username, "role": user.role}

    @app.get("/maybe")
    async def maybe(user: Payload | None = Depends(fastapi_auth.get_optional_user)):
        return {"username": user.username if user else None}

    @app.get("/admin")
    async def admin(user: Payload = Depends(fastapi_auth.require_roles("admin"))):
        return {"username": user.username}

    return TestClient(app)


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_valid_bearer_token(client, fastapi_auth):
    issued = fastapi_auth.auth.issue("alice", "admin")

    resp = client.get("/me", headers=_bearer(issued.token))
    assert resp.status_code == 200
    assert resp.json() == {"username": "alice", "role": "admin"}


def test_token_from_cookie(client, fastapi_auth):
    issued = fastapi_auth.auth.issue("alice", "user")

    resp = client.get("/me", headers={"Cookie": f"access_token={issued.token}"})
    assert resp.status_code == 200
    assert resp.json()["username"] == "alice"


def test_missing_token(client):
    resp = client.get("/me")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authenticated"


def test_invalid_token(client):
    resp = client.get("/me", headers=_bearer("garbage"))
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_expired_token(client, fastapi_auth):
    issued = fastapi_auth.auth.issue("alice", "admin", -timedelta(minutes=1))

    resp = client.get("/me", headers=_bearer(issued.token))
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token expired"


def test_optional_user(client, fastapi_auth):
    issued = fastapi_auth.auth.issue("alice", "user")

    assert client.get("/maybe").json() == {"username": None}
    assert client.get("/maybe", headers=_bearer("garbage")).json() == {"username": None}
    assert client.get("/maybe", headers=_bearer(issued.token)).json() == {"username": "alice"}


def test_require_roles(client, fastapi_auth):
    admin = fastapi_auth.auth.issue("alice", "admin")
    user = fastapi_auth.auth.issue("bob", "user")

    assert client.get("/admin", headers=_bearer(admin.token)).status_code == 200
    assert client.get("/admin", headers=_bearer(user.token)).status_code == 403
    assert client.get("/admin").status_code == 401


def test_create_fastapi_auth_needs_configuration():
    with pytest.raises(ValueError):
        create_fastapi_auth()
