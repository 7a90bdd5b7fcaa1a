"""Bearer token encoding and decoding (HS256 via PyJWT).

Agora only consumes tokens issued by the identity service. Both sides share
the secret in AuthSettings; the claims are the acting user's ID plus the
standard issue/expiry timestamps.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, field_validator

from agora.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "exp"]


class TokenPayload(BaseModel):
    """Decoded bearer token claims."""

    user_id: str
    exp: datetime
    iat: datetime | None = None

    @field_validator("user_id")
    @classmethod
    def user_id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("user_id claim is empty")
        return v


class JWTError(Exception):
    """Token could not be accepted (expired, tampered, malformed)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign a token for the user with the shared secret.

    Args:
        user_id: User ID placed in the user_id claim
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    issued = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "iat": issued,
        "exp": issued + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry, then parse the claims.

    Raises:
        JWTError: If the token is expired, tampered with, or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError as e:
        raise JWTError(f"Invalid token claims: {e}")
