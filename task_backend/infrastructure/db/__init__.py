from .mongo_connection import (
    get_database,
    get_user_collection,
    get_task_collection,
    ensure_indexes,
    close_connection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_task_repository import MongoTaskRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_task_collection",
    "ensure_indexes",
    "close_connection",
    "MongoUserRepository",
    "MongoTaskRepository",
]
