from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id or "", email=user.email, created_at=user.created_at)
