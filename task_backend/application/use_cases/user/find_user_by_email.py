# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.email_rules import normalize_email


class FindUserByEmailUseCase:
    """Use case for looking up a user by email"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, email: str) -> Optional[User]:
        """
        Find a user by email. Only normalizes the address, the shape is not checked.
        
        Returns:
            User if found, None otherwise
            
        Raises:
            ValidationError: If email is empty after trimming
        """
        return await self.user_repository.find_by_email(normalize_email(email))
