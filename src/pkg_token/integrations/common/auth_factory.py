from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable

from ...adapters.jwt.maker import JWTMaker
from ...adapters.sealed.maker import SealedMaker
from ...application.use_cases.authenticate import AuthenticateTokenUseCase
from ...application.use_cases.authorize import AuthorizeRoleUseCase
from ...application.use_cases.issue import IssuedToken, IssueTokenUseCase
from ...domain.constants import TokenType
from ...domain.payload import Payload
from ...domain.ports import TokenMaker
from ...domain.value_objects import RoleRequirement
from ...tools.settings import TokenSettings


def create_token_maker(
        secret_key: str | bytes,
        token_type: TokenType = TokenType.JWT,
) -> TokenMaker:
    """
    Build the TokenMaker for `token_type`.

    Raises:
        InvalidSecretKeyError if the secret is shorter than the minimum.
    """
    if token_type is TokenType.JWT:
        return JWTMaker(secret_key)
    if token_type is TokenType.SEALED:
        return SealedMaker(secret_key)
    raise ValueError(f"Unsupported token type: {token_type!r}")


@dataclass(slots=True)
class TokenAuth:
    """
    Framework-agnostic token facade.

    Integrations (FastAPI, CLI, etc.) adapt this to their own
    dependency / command systems.
    """

    issue_use_case: IssueTokenUseCase
    auth_use_case: AuthenticateTokenUseCase
    authorize_use_case: AuthorizeRoleUseCase

    # --- Core operations --------------------------------------------------

    def issue(self, username: str, role: str, duration: timedelta | None = None) -> IssuedToken:
        """(username, role) -> signed/sealed token plus its Payload."""
        return self.issue_use_case.execute(username, role, duration)

    def authenticate(self, token: str) -> Payload:
        """Token -> Payload (or raise auth exceptions)."""
        return self.auth_use_case.execute(token)

    def authorize(
            self,
            payload: Payload,
            requirements: Iterable[RoleRequirement],
    ) -> Payload:
        """Check requirements on an already verified Payload."""
        return self.authorize_use_case.execute(payload, requirements)

    # --- Convenience helpers to build requirements ------------------------

    def require_roles(self, *roles: str) -> RoleRequirement:
        return RoleRequirement(any_of=roles)


def create_token_auth_from_maker(
        token_maker: TokenMaker,
        *,
        access_token_duration: timedelta = timedelta(minutes=15),
) -> TokenAuth:
    return TokenAuth(
        issue_use_case=IssueTokenUseCase(
            token_maker=token_maker,
            duration=access_token_duration,
        ),
        auth_use_case=AuthenticateTokenUseCase(token_maker=token_maker),
        authorize_use_case=AuthorizeRoleUseCase(),
    )


def create_token_auth(settings: TokenSettings) -> TokenAuth:
    """
    High-level factory: TokenSettings -> TokenAuth.

    - builds the configured TokenMaker
    - wires issue, authenticate and authorize use cases
    - returns a TokenAuth facade.
    """
    token_maker = create_token_maker(settings.symmetric_key, settings.token_type)
    return create_token_auth_from_maker(
        token_maker,
        access_token_duration=settings.access_token_duration,
    )
