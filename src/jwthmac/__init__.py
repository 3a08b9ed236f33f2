"""
jwthmac

Stateless HS256 access tokens: sign a user id and an ordered list of
scopes with a shared secret, and verify them back with algorithm pinning,
signature, expiry and claim-shape checks.
"""

__version__ = "0.1.0"

from .config.settings import HmacSettings
from .config.env import settings_from_env
from .coder import encode, decode
from .domain.constants import ALGORITHM, TOKEN_TYPE, HASH_NAME, SEGMENT_ENCODING, Claim
from .domain.entities import AccessContext, ClaimSet
from .domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    SigningError,
    InvalidTokenError,
    MalformedTokenError,
    UnexpectedAlgorithmError,
    InvalidSignatureError,
    ExpiredTokenError,
    ClaimShapeError,
)
from .domain.value_objects import Subject, Scopes, ScopeRequirement, require_scopes
from .domain.ports import TokenSigner, TokenVerifier

from .application.use_cases.issue import IssueTokenUseCase
from .application.use_cases.authenticate import AuthenticateTokenUseCase
from .application.use_cases.authorize import AuthorizeScopesUseCase

from .adapters.pyjwt.hs256 import HS256Signer, HS256Verifier
from .integrations.common.auth_factory import AuthDependencies, create_auth_dependencies

__all__ = [
    "__version__",
    # codec
    "encode",
    "decode",
    "HmacSettings",
    "settings_from_env",
    # wire format
    "ALGORITHM",
    "TOKEN_TYPE",
    "HASH_NAME",
    "SEGMENT_ENCODING",
    "Claim",
    # domain core
    "AccessContext",
    "ClaimSet",
    "Subject",
    "Scopes",
    "ScopeRequirement",
    "require_scopes",
    "TokenSigner",
    "TokenVerifier",
    # exceptions
    "AuthenticationError",
    "AuthorizationError",
    "SigningError",
    "InvalidTokenError",
    "MalformedTokenError",
    "UnexpectedAlgorithmError",
    "InvalidSignatureError",
    "ExpiredTokenError",
    "ClaimShapeError",
    # use cases
    "IssueTokenUseCase",
    "AuthenticateTokenUseCase",
    "AuthorizeScopesUseCase",
    # adapters
    "HS256Signer",
    "HS256Verifier",
    "AuthDependencies",
    "create_auth_dependencies",
]
