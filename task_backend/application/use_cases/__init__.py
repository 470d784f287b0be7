from .auth import GetCurrentUserUseCase
from .user import (
    CreateUserUseCase,
    FindUserByEmailUseCase,
    FindUserByIdUseCase,
    LoginUserUseCase,
    LoginResult,
)
from .task import (
    CreateTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase,
)

__all__ = [
    "GetCurrentUserUseCase",
    "CreateUserUseCase",
    "FindUserByEmailUseCase",
    "FindUserByIdUseCase",
    "LoginUserUseCase",
    "LoginResult",
    "CreateTaskUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
]
