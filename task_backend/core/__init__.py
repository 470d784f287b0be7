from .config import Settings, get_settings
from .security import (
    create_jwt_token,
    decode_jwt_token,
    read_unverified_claims,
)
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "create_jwt_token",
    "decode_jwt_token",
    "read_unverified_claims",
    "setup_logging",
]
