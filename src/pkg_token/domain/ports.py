from __future__ import annotations

from datetime import timedelta
from typing import Protocol, Tuple

from .payload import Payload


class TokenMaker(Protocol):
    """
    Port for issuing and verifying tokens.

    Implementations live in the adapters layer (JWT, sealed box). Callers
    hold a TokenMaker and never need to know which one they have.
    """

    def create_token(
            self,
            username: str,
            role: str,
            duration: timedelta,
    ) -> Tuple[str, Payload]:
        """
        Build a payload valid for `duration` and return it with its token.
        """
        ...

    def verify_token(self, token: str) -> Payload:
        """
        Verify the given token and return its payload.

        Should:
          - check integrity with the maker's secret key
          - check expiry through Payload.valid()
        Raises:
          - TokenExpiredError
          - InvalidTokenError
        """
        ...
