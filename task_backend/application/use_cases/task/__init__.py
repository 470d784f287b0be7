from .create_task import CreateTaskUseCase
from .get_task import GetTaskUseCase
from .list_tasks import ListTasksUseCase
from .update_task import UpdateTaskUseCase
from .delete_task import DeleteTaskUseCase

__all__ = [
    "CreateTaskUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
]
