# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import ConflictError
from ...utils.datetime_utils import utc_now, ensure_utc
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Normalized email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None
        
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
    
    async def create(self, email: str) -> User:
        """
        Create a new user
        
        Args:
            email: Normalized email address
            
        Returns:
            Created User domain model with ID and created_at set
            
        Raises:
            ConflictError: If another user with this email was stored first
        """
        if not email:
            raise ValueError("Email cannot be empty")
        
        created_at = utc_now()
        user_dict = {
            UserFields.EMAIL: email,
            UserFields.CREATED_AT: created_at,
        }
        
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            # unique users.email index; a concurrent registration won
            raise ConflictError("Email is already registered")
        except Exception as e:
            raise RuntimeError(f"Error creating user: {str(e)}")
        
        return User(
            id=str(result.inserted_id),
            email=email,
            created_at=created_at,
        )
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
        )
