# Standard library imports
from datetime import datetime, timezone
from typing import List

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task
from ....domain.exceptions import ValidationError


# Tasks stored without a creation time sort as the oldest
_NO_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)


class ListTasksUseCase:
    """Use case for listing all tasks of a user, newest first"""
    
    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository
    
    async def execute(self, user_id: str) -> List[Task]:
        """
        List all tasks owned by a user
        
        The result is ordered by created_at descending whatever order the
        repository returns. The sort is stable, so tasks sharing a timestamp
        keep their repository order.
        
        Args:
            user_id: ID of the user
            
        Returns:
            List of Task objects, most recent first
        """
        if not user_id:
            raise ValidationError("User ID is required")
        
        tasks = await self.task_repository.find_all_by_user_id(user_id)
        return sorted(tasks, key=lambda task: task.created_at or _NO_TIMESTAMP, reverse=True)
