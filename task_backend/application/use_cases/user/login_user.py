# Standard library imports
import logging
from dataclasses import dataclass

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.email_rules import normalize_and_validate_email
from ....domain.exceptions import ConflictError
from ...services.auth_service import AuthService

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    """Outcome of a login: the user, a signed token and whether the user was just created"""
    user: User
    token: str
    is_new: bool


class LoginUserUseCase:
    """Use case for passwordless login: find or create a user by email, then issue a token"""
    
    def __init__(self, user_repository: UserRepository, auth_service: AuthService) -> None:
        self.user_repository = user_repository
        self.auth_service = auth_service
    
    async def execute(self, email: str) -> LoginResult:
        """
        Log a user in by email
        
        Args:
            email: Email address; trimmed and lower-cased before use
            
        Returns:
            LoginResult with is_new=True when the user was created by this call
            
        Raises:
            ValidationError: If email is empty or malformed
        """
        normalized_email = normalize_and_validate_email(email)
        
        user = await self.user_repository.find_by_email(normalized_email)
        is_new = False
        
        if user is None:
            try:
                user = await self.user_repository.create(normalized_email)
                is_new = True
            except ConflictError:
                # a concurrent login created the account first
                user = await self.user_repository.find_by_email(normalized_email)
                if user is None:
                    raise
        
        token = self.auth_service.generate_token(user.id or "", user.email)
        
        logger.info(f"User {user.id} logged in (new user: {is_new})")
        return LoginResult(user=user, token=token, is_new=is_new)
