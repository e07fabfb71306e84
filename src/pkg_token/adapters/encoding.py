from __future__ import annotations

import base64
import binascii

from ..domain.exceptions import InvalidTokenError


def b64url_encode(data: bytes) -> str:
    """Unpadded URL-safe base64, the alphabet used on the wire by both makers."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    """
    Strict inverse of `b64url_encode`.

    Rejects padding, characters outside the URL-safe alphabet and
    non-canonical trailing bits, so every change to the text changes the
    decoded bytes.

    Raises:
        InvalidTokenError
    """
    try:
        raw_text = segment.encode("ascii")
    except (AttributeError, UnicodeEncodeError) as exc:
        raise InvalidTokenError("Token is not ASCII text") from exc

    if b"=" in raw_text:
        raise InvalidTokenError("Token segment must not be padded")

    padded = raw_text + b"=" * (-len(raw_text) % 4)
    try:
        data = base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidTokenError("Token segment is not base64url") from exc

    if b64url_encode(data) != segment:
        raise InvalidTokenError("Token segment is not canonical base64url")
    return data
