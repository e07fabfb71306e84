from __future__ import annotations

import os
import re
from datetime import timedelta

from ..domain.constants import TokenType
from ..domain.ports import TokenMaker
from ..integrations.common.auth_factory import create_token_maker
from .settings import TokenSettings

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def parse_duration(raw: str) -> timedelta:
    """
    Parse `900`, `45s`, `15m`, `1h` or `2d` into a timedelta.
    """
    match = _DURATION_RE.match(raw or "")
    if not match:
        raise ValueError(f"Invalid duration: {raw!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit]: int(amount)})


def parse_token_type(raw: str) -> TokenType:
    try:
        return TokenType(raw.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(t.value for t in TokenType)
        raise ValueError(f"Invalid token type {raw!r}; expected one of: {allowed}") from exc


def settings_from_env() -> TokenSettings:
    symmetric_key = os.getenv("TOKEN_SYMMETRIC_KEY")
    if not symmetric_key:
        raise RuntimeError("Missing token settings: TOKEN_SYMMETRIC_KEY")

    settings = TokenSettings(symmetric_key=symmetric_key)

    token_type = os.getenv("TOKEN_TYPE")
    if token_type:
        settings.token_type = parse_token_type(token_type)

    duration = os.getenv("ACCESS_TOKEN_DURATION")
    if duration:
        settings.access_token_duration = parse_duration(duration)

    return settings


def maker_from_env() -> TokenMaker:
    """Convenience wrapper building the env-configured TokenMaker."""
    settings = settings_from_env()
    return create_token_maker(settings.symmetric_key, settings.token_type)
