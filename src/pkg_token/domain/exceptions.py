class AuthenticationError(Exception):
    """Raised when authentication fails."""
    pass


class AuthorizationError(Exception):
    """Raised when the token role does not satisfy a requirement."""
    pass


class TokenExpiredError(AuthenticationError):
    """Raised when token has expired."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when token is malformed, tampered with or signed by another key."""
    pass


class InvalidSecretKeyError(ValueError):
    """Raised when a maker is constructed with a secret that is too short."""
    pass
