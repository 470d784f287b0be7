# Standard library imports
from datetime import timedelta
from typing import Any, Dict

# External package imports
import jwt

# Local application imports
from .config import get_settings
from ..utils.datetime_utils import utc_now


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Sign an access token for the given claims

    iat and exp are added here; the lifetime comes from
    ACCESS_TOKEN_EXPIRE_MINUTES.

    Args:
        payload: Identity claims (sub, userId, email)

    Returns:
        Encoded JWT string
    """
    settings = get_settings()
    issued_at = utc_now()
    claims = dict(payload)
    claims["iat"] = issued_at
    claims["exp"] = issued_at + timedelta(minutes=settings.access_token_expire_minutes)

    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify a token's signature and expiry and return its claims

    Raises:
        ValueError: If the token is malformed, signed with another key or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError as e:
        raise ValueError(f"Invalid token: {str(e)}")


def read_unverified_claims(token: str) -> Dict[str, Any]:
    """Read token claims without checking the signature or expiry."""
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        raise ValueError(f"Invalid token: {str(e)}")
