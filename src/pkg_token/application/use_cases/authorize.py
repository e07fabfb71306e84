from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ...domain.exceptions import AuthorizationError
from ...domain.payload import Payload
from ...domain.value_objects import RoleRequirement


@dataclass(slots=True)
class AuthorizeRoleUseCase:
    """
    Application use case for authorization using declarative RoleRequirement
    objects.

    Takes:
      - a Payload (already verified)
      - an iterable of RoleRequirement objects

    and raises AuthorizationError if any requirement is not satisfied.
    """

    def _check_requirement(self, payload: Payload, requirement: RoleRequirement) -> None:
        if requirement.any_of and not requirement.allows(payload.role):
            raise AuthorizationError(
                f"Role {payload.role!r} is not one of: {list(requirement.any_of)}"
            )

    def execute(
            self,
            payload: Payload,
            requirements: Iterable[RoleRequirement],
    ) -> Payload:
        """
        Raises:
            AuthorizationError if any of the requirements are not satisfied.

        Returns:
            The same Payload if authorization succeeds (for chaining).
        """
        for requirement in requirements:
            self._check_requirement(payload, requirement)

        return payload
