# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import TaskFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
TASKS_COLLECTION = "tasks"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_task_collection() -> AsyncIOMotorCollection:
    """
    Get tasks collection from MongoDB
    
    Returns:
        MongoDB collection for tasks
    """
    return get_database()[TASKS_COLLECTION]


async def ensure_indexes(database: Optional[AsyncIOMotorDatabase] = None) -> None:
    """
    Create the indexes the repositories rely on.

    users.email is unique so a race between two registrations cannot create
    duplicate accounts; tasks are indexed by owner and creation time for the
    per-user listing.
    """
    database = database if database is not None else get_database()
    await database[USERS_COLLECTION].create_index(
        [(UserFields.EMAIL, ASCENDING)],
        unique=True,
        name="uniq_email",
    )
    await database[TASKS_COLLECTION].create_index(
        [(TaskFields.USER_ID, ASCENDING), (TaskFields.CREATED_AT, DESCENDING)],
        name="user_created_at",
    )
    logger.info("MongoDB indexes ensured")


def close_connection() -> None:
    """Close the shared MongoDB client, if one was opened"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None


__all__ = [
    "get_database",
    "get_user_collection",
    "get_task_collection",
    "ensure_indexes",
    "close_connection",
]
