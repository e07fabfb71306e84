from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from .exceptions import InvalidTokenError, TokenExpiredError


def utc_now() -> datetime:
    """Timezone-aware wall clock used by default by every maker."""
    return datetime.now(timezone.utc)


def _parse_timestamp(raw: Any, name: str) -> datetime:
    if not isinstance(raw, str):
        raise InvalidTokenError(f"Claim {name!r} must be a string")
    try:
        value = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidTokenError(f"Claim {name!r} is not an ISO-8601 timestamp") from exc
    if value.tzinfo is None:
        raise InvalidTokenError(f"Claim {name!r} has no UTC offset")
    return value


def _require_str(claims: Mapping[str, Any], name: str) -> str:
    value = claims.get(name)
    if not isinstance(value, str):
        raise InvalidTokenError(f"Claim {name!r} is missing or not a string")
    return value


@dataclass(frozen=True, slots=True)
class Payload:
    """
    Claims embedded in every token.

    `expired_at` is fixed when the payload is built; validity is only ever
    derived from it and the current time.
    """
    id: uuid.UUID
    username: str
    role: str
    issued_at: datetime
    expired_at: datetime

    @classmethod
    def new(
            cls,
            username: str,
            role: str,
            duration: timedelta,
            *,
            now: datetime | None = None,
    ) -> Payload:
        """
        Build a fresh payload.

        `duration` may be negative, which yields an already expired payload.
        """
        issued_at = now or utc_now()
        try:
            expired_at = issued_at + duration
        except OverflowError as exc:
            raise ValueError(f"Token duration {duration!r} is out of range") from exc
        return cls(
            id=uuid.uuid4(),
            username=username,
            role=role,
            issued_at=issued_at,
            expired_at=expired_at,
        )

    # ---- validity --------------------------------------------------------

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utc_now()) > self.expired_at

    def valid(self, now: datetime | None = None) -> None:
        """
        Raises:
            TokenExpiredError when `now` is past `expired_at`.
        """
        if self.is_expired(now):
            raise TokenExpiredError("Token has expired")

    # ---- serialization ---------------------------------------------------

    def to_claims(self) -> dict[str, str]:
        return {
            "id": str(self.id),
            "username": self.username,
            "role": self.role,
            "issued_at": self.issued_at.isoformat(timespec="microseconds"),
            "expired_at": self.expired_at.isoformat(timespec="microseconds"),
        }

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> Payload:
        """
        Rebuild a payload from decoded claims.

        Raises:
            InvalidTokenError if any claim is missing or malformed.
        """
        if not isinstance(claims, Mapping):
            raise InvalidTokenError("Claims must be an object")

        raw_id = _require_str(claims, "id")
        try:
            token_id = uuid.UUID(raw_id)
        except ValueError as exc:
            raise InvalidTokenError("Claim 'id' is not a UUID") from exc

        return cls(
            id=token_id,
            username=_require_str(claims, "username"),
            role=_require_str(claims, "role"),
            issued_at=_parse_timestamp(claims.get("issued_at"), "issued_at"),
            expired_at=_parse_timestamp(claims.get("expired_at"), "expired_at"),
        )
