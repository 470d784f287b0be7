from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    email: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
