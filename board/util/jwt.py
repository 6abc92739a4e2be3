"""Access token utilities.

Access tokens are issued and signed by the store's auth service. The API
never holds the signing secret: it only reads the claims to reject tokens
that are malformed or already expired before any remote call is made. The
store remains the authority on whether a token is valid.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel


class TokenClaims(BaseModel):
    """Access token claims."""

    sub: str
    exp: datetime
    email: str | None = None
    role: str | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


class ExpiredTokenError(JWTError):
    """Token is well-formed but past its expiry."""

    pass


def read_claims(token: str) -> TokenClaims:
    """Read the claims of an access token without verifying its signature.

    Args:
        token: Encoded access token

    Returns:
        Token claims

    Raises:
        ExpiredTokenError: If token is expired
        JWTError: If token is not a readable JWT
    """
    try:
        payload = jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": True},
        )
        return TokenClaims(**payload)
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
