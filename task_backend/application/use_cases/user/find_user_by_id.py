# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ValidationError


class FindUserByIdUseCase:
    """Use case for looking up a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> Optional[User]:
        """
        Find a user by ID
        
        Unlike task reads, an unknown ID is not an error here: the caller
        gets None and decides what that means.
        
        Raises:
            ValidationError: If user_id is empty after trimming
        """
        normalized_id = (user_id or "").strip()
        if not normalized_id:
            raise ValidationError("User ID is required")
        
        return await self.user_repository.find_by_id(normalized_id)
