from .user import User
from .task import Task, TaskUpdate

__all__ = ["User", "Task", "TaskUpdate"]
