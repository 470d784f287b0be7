# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import CurrentUser
from ...application.dto.task_dto import TaskCreateRequest, TaskUpdateRequest, TaskResponse
from ...application.use_cases.task.create_task import CreateTaskUseCase
from ...application.use_cases.task.get_task import GetTaskUseCase
from ...application.use_cases.task.list_tasks import ListTasksUseCase
from ...application.use_cases.task.update_task import UpdateTaskUseCase
from ...application.use_cases.task.delete_task import DeleteTaskUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
) -> List[TaskResponse]:
    """
    List all tasks of the current user, newest first
    
    Args:
        current_user: Current authenticated user (from dependency)
        
    Returns:
        List of TaskResponse objects
    """
    container = get_container()
    list_tasks_use_case = container.get(ListTasksUseCase)
    
    tasks = await list_tasks_use_case.execute(user_id=current_user.id)
    return [TaskResponse.from_domain(task) for task in tasks]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
) -> TaskResponse:
    """
    Get a task by ID
    
    Args:
        task_id: ID of the task
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    get_task_use_case = container.get(GetTaskUseCase)
    
    task = await get_task_use_case.execute(task_id=task_id, user_id=current_user.id)
    return TaskResponse.from_domain(task)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: TaskCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
) -> TaskResponse:
    """
    Create a task owned by the current user
    
    The owner always comes from the token, never from the request body.
    """
    container = get_container()
    create_task_use_case = container.get(CreateTaskUseCase)
    
    task = await create_task_use_case.execute(
        user_id=current_user.id,
        title=request.title,
        description=request.description,
    )
    return TaskResponse.from_domain(task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    request: TaskUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
) -> TaskResponse:
    """
    Update the fields present in the request body
    """
    container = get_container()
    update_task_use_case = container.get(UpdateTaskUseCase)
    
    task = await update_task_use_case.execute(
        task_id=task_id,
        changes=request.to_patch(),
        user_id=current_user.id,
    )
    return TaskResponse.from_domain(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
) -> None:
    container = get_container()
    delete_task_use_case = container.get(DeleteTaskUseCase)
    
    await delete_task_use_case.execute(task_id=task_id, user_id=current_user.id)
