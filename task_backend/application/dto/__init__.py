from .auth_dto import LoginRequest, LoginResponse, UserRegistrationRequest, CurrentUser
from .user_dto import UserResponse
from .task_dto import TaskCreateRequest, TaskUpdateRequest, TaskResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "UserRegistrationRequest",
    "CurrentUser",
    "UserResponse",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "TaskResponse",
]
