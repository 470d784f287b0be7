# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task
from ....domain.exceptions import ValidationError
from ....utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Use case for creating a new task for a user"""
    
    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository
    
    async def execute(
        self,
        user_id: str,
        title: str,
        description: Optional[str] = None,
    ) -> Task:
        """
        Create a new task
        
        Args:
            user_id: ID of the user who will own the task
            title: Task title, trimmed before storage
            description: Optional description, trimmed; empty when omitted
            
        Returns:
            Created Task with its persistence ID
            
        Raises:
            ValidationError: If title is blank or user_id is missing
        """
        if not title or not title.strip():
            raise ValidationError("Task title is required")
        
        if not user_id:
            raise ValidationError("User ID is required")
        
        now = utc_now()
        draft = Task(
            id=None,  # Will be set by repository
            user_id=user_id,
            title=title.strip(),
            description=(description or "").strip(),
            completed=False,
            created_at=now,
            updated_at=now,
        )
        
        task = await self.task_repository.create(draft)
        logger.info(f"Created task {task.id} for user {user_id}")
        return task
