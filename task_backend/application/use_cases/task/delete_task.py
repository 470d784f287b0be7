# Standard library imports
import logging

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from .task_access import load_owned_task

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """Use case for deleting a task"""
    
    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository
    
    async def execute(self, task_id: str, user_id: str) -> None:
        """
        Delete a task owned by the caller
        
        Raises:
            ValidationError: If task_id is empty
            NotFoundError: If task does not exist
            AuthorizationError: If task belongs to another user
        """
        await load_owned_task(
            self.task_repository,
            task_id,
            user_id,
            denied_message="You do not have permission to delete this task",
        )
        
        await self.task_repository.delete(task_id)
        logger.info(f"Deleted task {task_id} for user {user_id}")
