# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task
from .task_access import load_owned_task


class GetTaskUseCase:
    """Use case for getting a single task by ID"""
    
    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository
    
    async def execute(self, task_id: str, user_id: str) -> Task:
        """
        Get a task by ID
        
        Args:
            task_id: ID of the task
            user_id: ID of the calling user (for authorization check)
            
        Returns:
            The requested Task
            
        Raises:
            ValidationError: If task_id is empty
            NotFoundError: If task does not exist
            AuthorizationError: If task belongs to another user
        """
        return await load_owned_task(
            self.task_repository,
            task_id,
            user_id,
            denied_message="You do not have permission to access this task",
        )
