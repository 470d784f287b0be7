from pydantic import BaseModel, ConfigDict, Field

from .user_dto import UserResponse


class LoginRequest(BaseModel):
    """DTO for passwordless login request"""
    model_config = ConfigDict(extra="forbid")

    email: str = Field(max_length=320)


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    model_config = ConfigDict(extra="forbid")

    email: str = Field(max_length=320)


class LoginResponse(BaseModel):
    """DTO for login response: the user, a signed token and whether the user was just created"""
    model_config = ConfigDict(populate_by_name=True)

    user: UserResponse
    token: str
    is_new: bool = Field(alias="isNew")


class CurrentUser(BaseModel):
    """Caller identity resolved from a bearer token"""
    id: str
    email: str = ""
