from __future__ import annotations

import logging
from dataclasses import dataclass

from ...domain.exceptions import TokenExpiredError, InvalidTokenError, AuthenticationError
from ...domain.payload import Payload
from ...domain.ports import TokenMaker

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AuthenticateTokenUseCase:
    """
    Application use case:
    - Verify a token via the TokenMaker port
    - Hand back the embedded Payload

    Backend-agnostic: the same code path serves JWT and sealed tokens.
    """

    token_maker: TokenMaker

    def execute(self, token: str) -> Payload:
        """
        Authenticate a token and return its Payload.

        Raises:
            TokenExpiredError
            InvalidTokenError
            AuthenticationError
        """
        try:
            return self.token_maker.verify_token(token)
        except (TokenExpiredError, InvalidTokenError):
            # let callers distinguish these explicitly
            raise
        except Exception as exc:
            logger.warning("Unexpected token verification failure: %s", type(exc).__name__)
            raise AuthenticationError(f"Token validation failed: {exc}") from exc
