from .create_user import CreateUserUseCase
from .find_user_by_email import FindUserByEmailUseCase
from .find_user_by_id import FindUserByIdUseCase
from .login_user import LoginUserUseCase, LoginResult

__all__ = [
    "CreateUserUseCase",
    "FindUserByEmailUseCase",
    "FindUserByIdUseCase",
    "LoginUserUseCase",
    "LoginResult",
]
