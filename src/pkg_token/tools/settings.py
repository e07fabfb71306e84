from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from ..domain.constants import TokenType


@dataclass(slots=True)
class TokenSettings:
    """
    Token issuing settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    symmetric_key: str = field(repr=False)
    token_type: TokenType = TokenType.JWT
    access_token_duration: timedelta = timedelta(minutes=15)
