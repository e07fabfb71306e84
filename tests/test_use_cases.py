# tests/test_use_cases.py
from datetime import timedelta

import pytest

from pkg_token import (
    AuthenticateTokenUseCase,
    AuthenticationError,
    AuthorizationError,
    AuthorizeRoleUseCase,
    InvalidSecretKeyError,
    InvalidTokenError,
    IssueTokenUseCase,
    JWTMaker,
    SealedMaker,
    TokenExpiredError,
    TokenSettings,
    TokenType,
    create_token_auth,
    create_token_maker,
    require_roles,
)


class ExplodingMaker:
    def create_token(self, username, role, duration):
        raise AssertionError("not used")

    def verify_token(self, token):
        raise RuntimeError("backend blew up")


def test_issue_uses_configured_duration(maker_cls, secret):
    use_case = IssueTokenUseCase(token_maker=maker_cls(secret), duration=timedelta(minutes=5))

    issued = use_case.execute("alice", "user")
    assert issued.payload.expired_at - issued.payload.issued_at == timedelta(minutes=5)

    issued = use_case.execute("alice", "user", timedelta(seconds=30))
    assert issued.payload.expired_at - issued.payload.issued_at == timedelta(seconds=30)


def test_authenticate_returns_payload(maker_cls, secret):
    maker = maker_cls(secret)
    token, created = maker.create_token("alice", "admin", timedelta(minutes=1))

    assert AuthenticateTokenUseCase(token_maker=maker).execute(token) == created


def test_authenticate_passes_sentinel_errors_through(maker_cls, secret):
    maker = maker_cls(secret)
    use_case = AuthenticateTokenUseCase(token_maker=maker)
    expired, _ = maker.create_token("alice", "admin", -timedelta(minutes=1))

    with pytest.raises(TokenExpiredError):
        use_case.execute(expired)
    with pytest.raises(InvalidTokenError):
        use_case.execute("garbage")


def test_authenticate_wraps_unexpected_errors():
    use_case = AuthenticateTokenUseCase(token_maker=ExplodingMaker())

    with pytest.raises(AuthenticationError) as excinfo:
        use_case.execute("anything")

    assert not isinstance(excinfo.value, (InvalidTokenError, TokenExpiredError))
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_authorize_roles(secret):
    _, payload = JWTMaker(secret).create_token("alice", "admin", timedelta(minutes=1))
    use_case = AuthorizeRoleUseCase()

    assert use_case.execute(payload, [require_roles("admin", "owner")]) is payload
    assert use_case.execute(payload, []) is payload

    with pytest.raises(AuthorizationError):
        use_case.execute(payload, [require_roles("owner")])
    with pytest.raises(AuthorizationError):
        use_case.execute(payload, [require_roles("admin"), require_roles("user")])


def test_create_token_maker(secret):
    assert isinstance(create_token_maker(secret), JWTMaker)
    assert isinstance(create_token_maker(secret, TokenType.JWT), JWTMaker)
    assert isinstance(create_token_maker(secret, TokenType.SEALED), SealedMaker)

    with pytest.raises(InvalidSecretKeyError):
        create_token_maker("short", TokenType.SEALED)
    with pytest.raises(ValueError):
        create_token_maker(secret, "paseto")


@pytest.mark.parametrize("token_type", list(TokenType))
def test_token_auth_facade(secret, token_type):
    auth = create_token_auth(
        TokenSettings(
            symmetric_key=secret,
            token_type=token_type,
            access_token_duration=timedelta(minutes=10),
        )
    )

    issued = auth.issue("alice", "admin")
    payload = auth.authenticate(issued.token)
    assert payload == issued.payload
    assert payload.expired_at - payload.issued_at == timedelta(minutes=10)

    assert auth.authorize(payload, [auth.require_roles("admin")]) is payload
    with pytest.raises(AuthorizationError):
        auth.authorize(payload, [auth.require_roles("user")])


def test_tokens_do_not_cross_backends(secret):
    jwt_token, _ = JWTMaker(secret).create_token("alice", "admin", timedelta(minutes=1))
    sealed_token, _ = SealedMaker(secret).create_token("alice", "admin", timedelta(minutes=1))

    with pytest.raises(InvalidTokenError):
        SealedMaker(secret).verify_token(jwt_token)
    with pytest.raises(InvalidTokenError):
        JWTMaker(secret).verify_token(sealed_token)
