from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.task import Task, TaskUpdate


class TaskCreateRequest(BaseModel):
    """DTO for task creation request"""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=500)
    description: Optional[str] = Field(default=None, max_length=5000)


class TaskUpdateRequest(BaseModel):
    """DTO for task update request - every field is optional"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = Field(default=None, max_length=5000)
    completed: Optional[bool] = None

    def to_patch(self) -> TaskUpdate:
        """Convert to a domain patch; fields left out of the request stay absent"""
        return TaskUpdate(
            title=self.title,
            description=self.description,
            completed=self.completed,
        )


class TaskResponse(BaseModel):
    """DTO for task response"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    title: str
    description: str
    completed: bool
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id or "",
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
