from typing import TYPE_CHECKING
from ...application.services.auth_service import AuthService
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the token service and caller identity use case"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register AuthService as a singleton (stateless, shared by all use cases)
        and GetCurrentUserUseCase as a factory.
        """
        if not container.is_registered(AuthService):
            container.register_singleton(AuthService, AuthService())
        
        container.register_factory(
            GetCurrentUserUseCase,
            lambda: GetCurrentUserUseCase(
                auth_service=container.get(AuthService)
            )
        )
