from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from ...domain.payload import Payload
from ...domain.ports import TokenMaker


@dataclass(frozen=True, slots=True)
class IssuedToken:
    token: str
    payload: Payload


@dataclass(slots=True)
class IssueTokenUseCase:
    """
    Application use case: issue an access token with a configured lifetime.
    """

    token_maker: TokenMaker
    duration: timedelta

    def execute(self, username: str, role: str, duration: timedelta | None = None) -> IssuedToken:
        token, payload = self.token_maker.create_token(
            username,
            role,
            self.duration if duration is None else duration,
        )
        return IssuedToken(token=token, payload=payload)
