from enum import Enum

# Minimum length, in bytes of the UTF-8 encoded secret, accepted by every maker.
MIN_SECRET_KEY_LENGTH = 32


class TokenType(Enum):
    JWT = "jwt"
    SEALED = "sealed"
