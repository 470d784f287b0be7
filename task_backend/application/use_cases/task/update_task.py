# Standard library imports
import logging

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task, TaskUpdate
from ....domain.exceptions import ValidationError
from ....utils.datetime_utils import utc_now
from .task_access import load_owned_task

logger = logging.getLogger(__name__)


class UpdateTaskUseCase:
    """Use case for partially updating a task"""
    
    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository
    
    async def execute(self, task_id: str, changes: TaskUpdate, user_id: str) -> Task:
        """
        Apply the present fields of a patch to a task
        
        Args:
            task_id: ID of the task
            changes: Patch; None fields are left untouched
            user_id: ID of the calling user (for authorization check)
            
        Returns:
            Updated Task
            
        Raises:
            ValidationError: If task_id is empty or a present title is blank
            NotFoundError: If task does not exist
            AuthorizationError: If task belongs to another user
        """
        await load_owned_task(
            self.task_repository,
            task_id,
            user_id,
            denied_message="You do not have permission to update this task",
        )
        
        update = TaskUpdate(updated_at=utc_now())
        
        if changes.title is not None:
            if not changes.title.strip():
                raise ValidationError("Task title cannot be empty")
            update.title = changes.title.strip()
        
        if changes.description is not None:
            update.description = changes.description.strip()
        
        if changes.completed is not None:
            update.completed = changes.completed
        
        task = await self.task_repository.update(task_id, update)
        logger.info(
            f"Updated task {task_id} for user {user_id}: "
            f"{sorted(name for name in update.to_fields() if name != 'updated_at')}"
        )
        return task
