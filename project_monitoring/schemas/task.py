import uuid
from datetime import datetime

from pydantic import Field, field_validator

from project_monitoring.models.task import TaskStatus
from project_monitoring.schemas.base import ApiModel, normalize_optional_text
from project_monitoring.schemas.user import ShortUserResponse


def _validate_title(value: str) -> str:
    normalized = value.strip()
    if not normalized:
        raise ValueError('Task title is required.')
    return normalized


class CreateTaskRequest(ApiModel):
    title: str
    description: str | None = None
    assignee: uuid.UUID | None = None
    status: TaskStatus = TaskStatus.BACKLOG
    estimated_time: str | None = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, value: str) -> str:
        return _validate_title(value)

    @field_validator('description', 'estimated_time')
    @classmethod
    def validate_optional_text(cls, value: str | None) -> str | None:
        return normalize_optional_text(value)


class TaskPatch(ApiModel):
    """Sparse task update; ``assignee`` is the user id of a project participant."""

    title: str | None = None
    description: str | None = None
    assignee: uuid.UUID | None = None
    status: TaskStatus | None = None
    estimated_time: str | None = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return _validate_title(value)


class TaskSearchRequest(ApiModel):
    status: TaskStatus | None = None
    assignee: uuid.UUID | None = None
    offset: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)


class ShortTaskResponse(ApiModel):
    id: int
    title: str
    description: str | None = None
    assignee: uuid.UUID | None = None
    creator_id: uuid.UUID | None = None
    status: TaskStatus
    estimated_time: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskResponse(ShortTaskResponse):
    project_id: int


class TaskInfoResponse(TaskResponse):
    creator: ShortUserResponse | None = None
    assignee_user: ShortUserResponse | None = None


class TaskListResponse(ApiModel):
    tasks: list[TaskResponse]
    count: int
