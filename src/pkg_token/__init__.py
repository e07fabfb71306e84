"""
pkg_token

Issue and verify time-bounded access tokens carrying a username and a role.
Two interchangeable backends sit behind one TokenMaker port: signed JWTs
and opaque ChaCha20-Poly1305 sealed tokens.
"""

__version__ = "0.1.0"

from .domain.constants import MIN_SECRET_KEY_LENGTH, TokenType
from .domain.payload import Payload
from .domain.exceptions import (
    TokenExpiredError,
    InvalidTokenError,
    InvalidSecretKeyError,
    AuthenticationError,
    AuthorizationError,
)
from .domain.value_objects import SecretKey, RoleRequirement, require_roles
from .domain.ports import TokenMaker

from .application.use_cases.issue import IssueTokenUseCase, IssuedToken
from .application.use_cases.authenticate import AuthenticateTokenUseCase
from .application.use_cases.authorize import AuthorizeRoleUseCase

from .adapters.jwt.maker import JWTMaker
from .adapters.sealed.maker import SealedMaker

from .integrations.common.auth_factory import (
    TokenAuth,
    create_token_auth,
    create_token_auth_from_maker,
    create_token_maker,
)
from .tools.settings import TokenSettings

__all__ = [
    "__version__",
    # domain core
    "MIN_SECRET_KEY_LENGTH",
    "TokenType",
    "Payload",
    "SecretKey",
    "RoleRequirement",
    "require_roles",
    "TokenMaker",
    # exceptions
    "TokenExpiredError",
    "InvalidTokenError",
    "InvalidSecretKeyError",
    "AuthenticationError",
    "AuthorizationError",
    # use cases
    "IssueTokenUseCase",
    "IssuedToken",
    "AuthenticateTokenUseCase",
    "AuthorizeRoleUseCase",
    # adapters
    "JWTMaker",
    "SealedMaker",
    # wiring
    "TokenAuth",
    "TokenSettings",
    "create_token_auth",
    "create_token_auth_from_maker",
    "create_token_maker",
]
