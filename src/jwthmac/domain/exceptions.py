class AuthenticationError(Exception):
    """Raised when authentication fails."""
    pass


class AuthorizationError(Exception):
    """Raised when the token lacks required scopes."""
    pass


class SigningError(Exception):
    """Raised when a claim set cannot be serialized or signed."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when token is malformed or invalid."""
    pass


class MalformedTokenError(InvalidTokenError):
    """Raised when the token is not three decodable segments."""
    pass


class UnexpectedAlgorithmError(InvalidTokenError):
    """Raised when the header declares anything other than HS256."""
    pass


class InvalidSignatureError(InvalidTokenError):
    """Raised when the signature does not match the signing key."""
    pass


class ExpiredTokenError(InvalidTokenError):
    """Raised when token has expired."""
    pass


class ClaimShapeError(InvalidTokenError):
    """Raised when a claim is missing or has the wrong type."""
    pass
