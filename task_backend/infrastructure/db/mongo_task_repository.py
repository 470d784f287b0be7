# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.task_repository import TaskRepository
from ...domain.models.task import Task, TaskUpdate
from ...domain.constants import TaskFields
from ...domain.exceptions import NotFoundError
from ...utils.datetime_utils import utc_now, ensure_utc
from .mongo_connection import get_task_collection


# TaskUpdate attribute -> document field
_PATCH_FIELDS = {
    "title": TaskFields.TITLE,
    "description": TaskFields.DESCRIPTION,
    "completed": TaskFields.COMPLETED,
    "updated_at": TaskFields.UPDATED_AT,
}

class MongoTaskRepository(TaskRepository):
    """MongoDB implementation of TaskRepository"""
    
    def __init__(self, task_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.task_collection = task_collection if task_collection is not None else get_task_collection()
    
    async def find_all_by_user_id(self, user_id: str) -> List[Task]:
        """
        Find all tasks owned by a user, newest first
        
        Args:
            user_id: The owner user ID
            
        Returns:
            List of Task domain models
        """
        if not user_id:
            return []
        
        try:
            cursor = self.task_collection.find({TaskFields.USER_ID: user_id}).sort(
                TaskFields.CREATED_AT, DESCENDING
            )
            tasks = []
            async for document in cursor:
                tasks.append(self._document_to_task(document))
            return tasks
        except Exception as e:
            raise RuntimeError(f"Error finding tasks by user ID: {str(e)}")
    
    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """
        Find task by ID
        
        Args:
            task_id: The task ID to find
            
        Returns:
            Task domain model if found, None otherwise
        """
        object_id = self._to_object_id(task_id)
        if object_id is None:
            return None
        
        try:
            document = await self.task_collection.find_one({TaskFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_task(document)
        except Exception as e:
            raise RuntimeError(f"Error finding task by ID: {str(e)}")
    
    async def create(self, task: Task) -> Task:
        """
        Insert a new task
        
        Args:
            task: Task draft without ID
            
        Returns:
            Created Task domain model with ID set
        """
        if not task:
            raise ValueError("Task cannot be None")
        
        task_dict = self._task_to_dict(task)
        
        try:
            result = await self.task_collection.insert_one(task_dict)
        except Exception as e:
            raise RuntimeError(f"Error creating task: {str(e)}")
        
        return Task(
            id=str(result.inserted_id),
            user_id=task_dict[TaskFields.USER_ID],
            title=task_dict[TaskFields.TITLE],
            description=task_dict[TaskFields.DESCRIPTION],
            completed=task_dict[TaskFields.COMPLETED],
            created_at=task_dict[TaskFields.CREATED_AT],
            updated_at=task_dict[TaskFields.UPDATED_AT],
        )
    
    async def update(self, task_id: str, changes: TaskUpdate) -> Task:
        """
        Apply a partial update
        
        Only fields present in the patch are written. updated_at is always set.
        
        Raises:
            NotFoundError: If no task has this ID
        """
        object_id = self._to_object_id(task_id)
        if object_id is None:
            raise NotFoundError(f"Task with ID {task_id} not found")
        
        update_fields: Dict[str, Any] = {
            _PATCH_FIELDS[name]: value for name, value in changes.to_fields().items()
        }
        update_fields.setdefault(TaskFields.UPDATED_AT, utc_now())
        
        try:
            updated_document = await self.task_collection.find_one_and_update(
                {TaskFields.MONGO_ID: object_id},
                {"$set": update_fields},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise RuntimeError(f"Error updating task: {str(e)}")
        
        if updated_document is None:
            raise NotFoundError(f"Task with ID {task_id} not found")
        
        return self._document_to_task(updated_document)
    
    async def delete(self, task_id: str) -> None:
        """
        Delete a task
        
        Raises:
            NotFoundError: If no task has this ID
        """
        object_id = self._to_object_id(task_id)
        if object_id is None:
            raise NotFoundError(f"Task with ID {task_id} not found")
        
        try:
            delete_result = await self.task_collection.delete_one({TaskFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting task: {str(e)}")
        
        if delete_result.deleted_count == 0:
            raise NotFoundError(f"Task with ID {task_id} not found")
    
    @staticmethod
    def _to_object_id(task_id: str) -> Optional[ObjectId]:
        if not task_id:
            return None
        try:
            return ObjectId(task_id)
        except (InvalidId, ValueError, TypeError):
            return None
    
    def _document_to_task(self, document: Dict[str, Any]) -> Task:
        """
        Convert MongoDB document to Task domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Task domain model
        """
        if not document or TaskFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return Task(
            id=str(document[TaskFields.MONGO_ID]),
            user_id=document.get(TaskFields.USER_ID, ""),
            title=document.get(TaskFields.TITLE, ""),
            description=document.get(TaskFields.DESCRIPTION, ""),
            completed=bool(document.get(TaskFields.COMPLETED, False)),
            created_at=ensure_utc(document.get(TaskFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(TaskFields.UPDATED_AT)),
        )
    
    def _task_to_dict(self, task: Task) -> Dict[str, Any]:
        """
        Convert Task domain model to MongoDB document
        
        Missing timestamps are filled with the current time so a stored task
        always has both.
        """
        now = utc_now()
        created_at = task.created_at or now
        return {
            TaskFields.USER_ID: task.user_id,
            TaskFields.TITLE: task.title,
            TaskFields.DESCRIPTION: task.description or "",
            TaskFields.COMPLETED: bool(task.completed),
            TaskFields.CREATED_AT: created_at,
            TaskFields.UPDATED_AT: task.updated_at or created_at,
        }
