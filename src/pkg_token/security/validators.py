"""
Format checks for raw user input, run before a username reaches a maker.

Every validator returns None on success and raises ValueError with a
message suitable for showing to the user.

validate_email accepts a bare address (`alice@example.com`), a quoted
local part (`"alice smith"@example.com`) or a named address
(`Alice <alice@example.com>`). Comments and domain literals are rejected.
"""

from __future__ import annotations

import re

_USERNAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]{3,15}$")
_PASSWORD_CHARS_RE = re.compile(r"^[A-Za-z0-9@$!%*?&]{8,16}$")
_LOWERCASE_RE = re.compile(r"[a-z]")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")

_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_QUOTED = r'"(?:[^"\\\r\n]|\\.)+"'
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_ADDR_SPEC_RE = re.compile(
    rf"^(?:{_ATOM}(?:\.{_ATOM})*|{_QUOTED})@{_LABEL}(?:\.{_LABEL})*$"
)
# `Display Name <addr-spec>`; the name may be empty or quoted.
_NAME_ADDR_RE = re.compile(r'^\s*(?:"(?:[^"\\]|\\.)*"|[^<>"]*?)\s*<([^<>]*)>\s*$')


def _addr_spec(value: str) -> str:
    match = _NAME_ADDR_RE.fullmatch(value)
    return match.group(1) if match else value


def validate_string(value: str, min_length: int, max_length: int) -> None:
    # lengths are counted in UTF-8 bytes
    if not min_length <= len(value.encode("utf-8")) <= max_length:
        raise ValueError(f"must contain from {min_length}-{max_length} characters")


def validate_username(value: str) -> None:
    if not _USERNAME_RE.fullmatch(value):
        raise ValueError(
            "must contain only letters, numbers, and underscores "
            "and be between 4-16 characters long"
        )


def validate_password(value: str) -> None:
    if not _PASSWORD_CHARS_RE.fullmatch(value):
        raise ValueError(
            "must be between 8-16 characters long and contain only letters, "
            "numbers, and special characters @$!%*?&"
        )
    if not _LOWERCASE_RE.search(value):
        raise ValueError("must contain at least one lowercase letter")
    if not _UPPERCASE_RE.search(value):
        raise ValueError("must contain at least one uppercase letter")
    if not _DIGIT_RE.search(value):
        raise ValueError("must contain at least one number")


def validate_email(value: str) -> None:
    validate_string(value, 3, 320)
    if not _ADDR_SPEC_RE.fullmatch(_addr_spec(value)):
        raise ValueError("invalid email address")
