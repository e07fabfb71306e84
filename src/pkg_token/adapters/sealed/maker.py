from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timedelta
from typing import Callable, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from ...domain.exceptions import InvalidTokenError
from ...domain.payload import Payload, utc_now
from ...domain.value_objects import SecretKey
from ..encoding import b64url_decode, b64url_encode

logger = logging.getLogger(__name__)

NONCE_SIZE = 12
TAG_SIZE = 16

# Bound into every box as associated data; a token sealed under another
# format version never opens.
_ASSOCIATED_DATA = b"pkg_token.sealed.v1"
_KDF_INFO = b"pkg_token sealed token key"


def _derive_key(secret: SecretKey) -> bytes:
    """
    Map the secret onto a 32-byte ChaCha20-Poly1305 key.

    Every byte of the secret contributes; longer secrets are not truncated.
    """
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=32,
        salt=None,
        info=_KDF_INFO,
    )
    return hkdf.derive(secret.value)


class SealedMaker:
    """
    Adapter implementing TokenMaker with ChaCha20-Poly1305 sealed boxes.

    The token is `base64url(nonce || ciphertext || tag)`: opaque to anyone
    without the key, and tamper evident. A wrong key and a malformed token
    fail the same way.
    """

    def __init__(
        self,
        secret_key: str | bytes,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._aead = ChaCha20Poly1305(_derive_key(SecretKey(secret_key)))
        self._clock = clock

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def create_token(
        self,
        username: str,
        role: str,
        duration: timedelta,
    ) -> Tuple[str, Payload]:
        payload = Payload.new(username, role, duration, now=self._clock())
        plaintext = json.dumps(
            payload.to_claims(), separators=(",", ":"), sort_keys=True
        ).encode("utf-8")

        nonce = os.urandom(NONCE_SIZE)
        sealed = self._aead.encrypt(nonce, plaintext, _ASSOCIATED_DATA)
        logger.debug(
            "Issued sealed token id=%s username=%s role=%s",
            payload.id,
            username,
            role,
        )
        return b64url_encode(nonce + sealed), payload

    def verify_token(self, token: str) -> Payload:
        """
        Open the box, check expiry, return the embedded payload.

        Raises:
            TokenExpiredError
            InvalidTokenError
        """
        try:
            plaintext = self._open(token)
            claims = json.loads(plaintext.decode("utf-8"))
        except InvalidTokenError as exc:
            logger.debug("Rejected sealed token: %s", exc)
            raise
        except (InvalidTag, ValueError) as exc:
            logger.debug("Rejected sealed token: %s", type(exc).__name__)
            raise InvalidTokenError("Invalid token") from exc

        payload = Payload.from_claims(claims)
        payload.valid(self._clock())
        return payload

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _open(self, token: str) -> bytes:
        raw = b64url_decode(token)
        if len(raw) < NONCE_SIZE + TAG_SIZE:
            raise InvalidTokenError("Invalid token")
        nonce, sealed = raw[:NONCE_SIZE], raw[NONCE_SIZE:]
        return self._aead.decrypt(nonce, sealed, _ASSOCIATED_DATA)
