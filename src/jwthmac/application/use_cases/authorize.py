from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ...domain.entities import AccessContext
from ...domain.exceptions import AuthorizationError
from ...domain.value_objects import ScopeRequirement, Scopes


@dataclass(slots=True)
class AuthorizeScopesUseCase:
    """
    Application use case for authorization using declarative ScopeRequirement
    objects.

    Takes:
      - an AccessContext (already authenticated)
      - an iterable of ScopeRequirement objects

    and raises AuthorizationError if any requirement is not satisfied.
    Scopes are compared by name only.
    """

    def _check_requirement(self, scopes: Scopes, requirement: ScopeRequirement) -> None:
        any_of = list(requirement.any_of)
        all_of = list(requirement.all_of)

        if any_of and not scopes.contains_any(any_of):
            raise AuthorizationError(
                f"Missing at least one required scope from: {any_of}"
            )

        if all_of and not scopes.contains_all(all_of):
            raise AuthorizationError(
                f"Missing required scope(s): {all_of}"
            )

    def execute(
            self,
            context: AccessContext,
            requirements: Iterable[ScopeRequirement],
    ) -> AccessContext:
        """
        Raises:
            AuthorizationError if any of the requirements are not satisfied.

        Returns:
            The same AccessContext if authorization succeeds (for chaining).
        """
        for requirement in requirements:
            self._check_requirement(context.scopes, requirement)

        return context
