# src/pkg_token/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .constants import MIN_SECRET_KEY_LENGTH
from .exceptions import InvalidSecretKeyError


# --- Key material ---------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SecretKey:
    """
    Symmetric secret shared by a maker for its whole lifetime.

    Length is counted in bytes of the UTF-8 encoding and checked once,
    when the value object is built.
    """
    value: bytes = field(repr=False)

    def __init__(self, value: str | bytes) -> None:
        raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        if len(raw) < MIN_SECRET_KEY_LENGTH:
            raise InvalidSecretKeyError(
                f"invalid key length: must be at least {MIN_SECRET_KEY_LENGTH} bytes"
            )
        object.__setattr__(self, "value", raw)

    def __len__(self) -> int:
        return len(self.value)


# --- Access / claims value objects ---------------------------------------


def _normalize(values: Iterable[str]) -> Tuple[str, ...]:
    """
    Normalize an iterable of strings into a tuple.
    If a plain string is passed, treat it as a single-element collection.
    """
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True, slots=True)
class RoleRequirement:
    """
    Declarative authorization requirement: the token role must be one of
    `any_of`.
    """

    any_of: Tuple[str, ...] = ()

    def __init__(self, any_of: Iterable[str] | None = None) -> None:
        object.__setattr__(self, "any_of", _normalize(any_of or ()))

    def allows(self, role: str) -> bool:
        return role in self.any_of


def require_roles(*roles: str) -> RoleRequirement:
    return RoleRequirement(any_of=roles)
