from enum import Enum

# Wire format of every token this package issues or accepts.
ALGORITHM = "HS256"
TOKEN_TYPE = "JWT"
HASH_NAME = "sha256"
SEGMENT_ENCODING = "base64url-nopad"


class Claim(str, Enum):
    SUBJECT = "usr"
    ISSUER = "iss"
    ISSUED_AT = "iat"
    EXPIRES_AT = "exp"
    SCOPES = "scopes"
