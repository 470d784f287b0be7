# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.email_rules import normalize_and_validate_email
from ....domain.exceptions import ConflictError

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for registering a new user by email"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, email: str) -> User:
        """
        Register a new user
        
        Args:
            email: Email address; trimmed and lower-cased before use
            
        Returns:
            Created User with ID and created_at set
            
        Raises:
            ValidationError: If email is empty or malformed
            ConflictError: If a user with this email already exists
        """
        normalized_email = normalize_and_validate_email(email)
        
        existing_user = await self.user_repository.find_by_email(normalized_email)
        if existing_user is not None:
            raise ConflictError("Email is already registered")
        
        user = await self.user_repository.create(normalized_email)
        logger.info(f"Registered user {user.id}")
        return user
