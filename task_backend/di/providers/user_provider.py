from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.auth_service import AuthService
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.find_user_by_email import FindUserByEmailUseCase
from ...application.use_cases.user.find_user_by_id import FindUserByIdUseCase
from ...application.use_cases.user.login_user import LoginUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            FindUserByEmailUseCase,
            lambda: FindUserByEmailUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            FindUserByIdUseCase,
            lambda: FindUserByIdUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository),
                auth_service=container.get(AuthService),
            )
        )
