from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ...adapters.pyjwt.hs256 import HS256Signer, HS256Verifier
from ...application.use_cases.authenticate import AuthenticateTokenUseCase
from ...application.use_cases.authorize import AuthorizeScopesUseCase
from ...application.use_cases.issue import IssueTokenUseCase
from ...config.settings import HmacSettings
from ...domain.entities import AccessContext
from ...domain.ports import TokenSigner, TokenVerifier
from ...domain.value_objects import ScopeRequirement


@dataclass(slots=True)
class AuthDependencies:
    """
    Framework-agnostic auth facade.

    Integrations (FastAPI, CLI, etc.) adapt this to their own
    dependency / command systems.
    """

    issue_use_case: IssueTokenUseCase
    auth_use_case: AuthenticateTokenUseCase
    authorize_use_case: AuthorizeScopesUseCase

    # --- Core operations --------------------------------------------------

    def issue(self, user_id: str, scopes: Sequence[str] = ()) -> str:
        """(user id, scopes) -> signed token (or raise SigningError)."""
        return self.issue_use_case.execute(user_id, scopes)

    def authenticate(self, token: str) -> AccessContext:
        """Token -> AccessContext (or raise auth exceptions)."""
        return self.auth_use_case.execute(token)

    def authorize(
            self,
            context: AccessContext,
            requirements: Iterable[ScopeRequirement],
    ) -> AccessContext:
        """Check requirements on an existing AccessContext."""
        return self.authorize_use_case.execute(context, requirements)

    # --- Convenience helpers to build requirements ------------------------

    def require_scopes(
            self,
            *,
            any_of: Sequence[str] = (),
            all_of: Sequence[str] = (),
    ) -> ScopeRequirement:
        return ScopeRequirement(any_of=any_of, all_of=all_of)


def create_auth_dependencies(settings: HmacSettings) -> AuthDependencies:
    """
    High-level factory: HmacSettings -> AuthDependencies.

    - builds an HS256Signer and HS256Verifier sharing the same settings
    - wires the issue / authenticate / authorize use cases
    - returns an AuthDependencies facade.
    """
    signer: TokenSigner = HS256Signer(settings)
    verifier: TokenVerifier = HS256Verifier(settings)

    return AuthDependencies(
        issue_use_case=IssueTokenUseCase(token_signer=signer),
        auth_use_case=AuthenticateTokenUseCase(token_verifier=verifier),
        authorize_use_case=AuthorizeScopesUseCase(),
    )
