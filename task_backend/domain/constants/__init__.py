"""Constants for domain model field names"""

from .user_fields import UserFields
from .task_fields import TaskFields

__all__ = [
    "UserFields",
    "TaskFields",
]
