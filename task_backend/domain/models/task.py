# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class Task:
    """
    Pure domain model for Task entity - no external dependencies.
    
    A task belongs to exactly one user. The id is assigned by the persistence
    layer on creation; created_at never changes and updated_at is refreshed on
    every mutation.
    """
    id: Optional[str]
    user_id: str
    title: str
    description: str = ""
    completed: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("Task owner user ID is required")
        if not self.title or len(self.title.strip()) < 1:
            raise ValueError("Task title is required")


@dataclass
class TaskUpdate:
    """
    Sparse set of task changes.

    None marks a field as absent. An empty description is an explicit value
    and is sent to the repository like any other.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    updated_at: Optional[datetime] = None
    
    def to_fields(self) -> Dict[str, Any]:
        """Return only the fields that are present, keyed by attribute name."""
        fields = {
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "updated_at": self.updated_at,
        }
        return {name: value for name, value in fields.items() if value is not None}
