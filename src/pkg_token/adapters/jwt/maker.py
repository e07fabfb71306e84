from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Tuple

import jwt
from jwt.exceptions import PyJWTError

from ...domain.exceptions import InvalidTokenError
from ...domain.payload import Payload, utc_now
from ...domain.value_objects import SecretKey
from ..encoding import b64url_decode

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class JWTMaker:
    """
    Adapter implementing TokenMaker with HMAC-SHA256 signed JWTs (PyJWT).

    The claims travel in clear text; the signature only makes them tamper
    evident. The algorithm is pinned to HS256 before any claim is read.
    """

    def __init__(
        self,
        secret_key: str | bytes,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._secret = SecretKey(secret_key)
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
        token = jwt.encode(
            payload.to_claims(),
            self._secret.value,
            algorithm=ALGORITHM,
        )
        logger.debug(
            "Issued JWT id=%s username=%s role=%s", payload.id, username, role
        )
        return token, payload

    def verify_token(self, token: str) -> Payload:
        """
        Verify signature and expiry, return the embedded payload.

        Raises:
            TokenExpiredError
            InvalidTokenError
        """
        try:
            self._check_structure(token)
            self._check_algorithm(token)
            claims = jwt.decode(
                token,
                self._secret.value,
                algorithms=[ALGORITHM],
            )
        except InvalidTokenError as exc:
            logger.debug("Rejected JWT: %s", exc)
            raise
        except PyJWTError as exc:
            logger.debug("Rejected JWT: %s", type(exc).__name__)
            raise InvalidTokenError("Invalid token") from exc

        payload = Payload.from_claims(claims)
        payload.valid(self._clock())
        return payload

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _check_structure(token: str) -> None:
        if not isinstance(token, str):
            raise InvalidTokenError("Token must be a string")
        segments = token.split(".")
        if len(segments) != 3:
            raise InvalidTokenError("Token must have three segments")
        for segment in segments:
            b64url_decode(segment)

    @staticmethod
    def _check_algorithm(token: str) -> None:
        header = jwt.get_unverified_header(token)
        if header.get("alg") != ALGORITHM:
            raise InvalidTokenError("Unexpected signing algorithm")
