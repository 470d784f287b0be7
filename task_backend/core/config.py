# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Task backend settings, read from environment variables.

    Every value has a default suitable for local development; JWT_SECRET_KEY
    must be overridden anywhere else.
    """
    
    def __init__(self) -> None:
        # MongoDB
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "task_manager")
        
        # Access tokens
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440")
        )
        
        # HTTP
        self.frontend_url: Final[str] = os.getenv("FRONTEND_URL", "http://localhost:4200")
        self.app_env: Final[str] = os.getenv("APP_ENV", "development")
        
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
    
    @property
    def cors_origins(self) -> List[str]:
        """FRONTEND_URL may list several origins separated by commas"""
        return [origin.strip() for origin in self.frontend_url.split(",") if origin.strip()]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide Settings, created on first use"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
