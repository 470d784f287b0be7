from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.task import Task, TaskUpdate


class TaskRepository(ABC):
    """Repository interface - defines contract for task data access"""
    
    @abstractmethod
    async def find_all_by_user_id(self, user_id: str) -> List[Task]:
        """Find all tasks owned by a user"""
        pass
    
    @abstractmethod
    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """Find task by ID"""
        pass
    
    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Persist a new task and return it with its assigned ID"""
        pass
    
    @abstractmethod
    async def update(self, task_id: str, changes: TaskUpdate) -> Task:
        """
        Apply a partial update and return the stored task.

        Raises NotFoundError if no task has this ID.
        """
        pass
    
    @abstractmethod
    async def delete(self, task_id: str) -> None:
        """
        Delete a task.

        Raises NotFoundError if no task has this ID.
        """
        pass
