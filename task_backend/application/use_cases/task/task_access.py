# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task
from ....domain.exceptions import AuthorizationError, NotFoundError, ValidationError


async def load_owned_task(
    task_repository: TaskRepository,
    task_id: str,
    user_id: str,
    denied_message: str,
) -> Task:
    """
    Look up a task and check that the caller owns it.
    
    Args:
        task_repository: Repository to read the task from
        task_id: ID of the task
        user_id: ID of the calling user
        denied_message: Message for the AuthorizationError when the owner differs
        
    Returns:
        The task, owned by user_id
        
    Raises:
        ValidationError: If task_id is empty (checked before the lookup)
        NotFoundError: If no task has this ID
        AuthorizationError: If the task belongs to another user
    """
    if not task_id:
        raise ValidationError("Task ID is required")
    
    task = await task_repository.find_by_id(task_id)
    if task is None:
        raise NotFoundError("Task not found")
    
    if task.user_id != user_id:
        raise AuthorizationError(denied_message)
    
    return task
