# tests/conftest.py
import secrets
from datetime import datetime, timedelta, timezone

import pytest

from pkg_token import JWTMaker, SealedMaker


class FakeClock:
    """Settable clock so tests can move time forward without sleeping."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


def random_secret(length: int = 32) -> str:
    return secrets.token_hex(length)[:length]


@pytest.fixture
def secret() -> str:
    return random_secret()


@pytest.fixture
def other_secret(secret) -> str:
    other = random_secret()
    while other == secret:
        other = random_secret()
    return other


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(params=[JWTMaker, SealedMaker], ids=["jwt", "sealed"])
def maker_cls(request):
    return request.param
