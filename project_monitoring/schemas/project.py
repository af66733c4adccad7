from datetime import datetime

from pydantic import Field, field_validator

from project_monitoring.schemas.base import ApiModel, normalize_optional_text
from project_monitoring.schemas.participant import ParticipantResponse
from project_monitoring.schemas.task import ShortTaskResponse

MAX_PROJECT_NAME_LENGTH = 200


def _validate_project_name(value: str) -> str:
    normalized = value.strip()
    if not normalized:
        raise ValueError('Project name is required.')
    if len(normalized) > MAX_PROJECT_NAME_LENGTH:
        raise ValueError(f'Project name must be {MAX_PROJECT_NAME_LENGTH} characters or fewer.')
    return normalized


class CreateProjectRequest(ApiModel):
    name: str
    description: str | None = None
    due_date: datetime | None = None
    avatar: str | None = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _validate_project_name(value)

    @field_validator('description', 'avatar')
    @classmethod
    def validate_optional_text(cls, value: str | None) -> str | None:
        return normalize_optional_text(value)


class ProjectPatch(ApiModel):
    """Sparse project update.

    A field left out of the body keeps its stored value; a field sent as null
    clears the stored value where the column allows it.
    """

    name: str | None = None
    description: str | None = None
    avatar: str | None = None
    report_url: str | None = None
    report_name: str | None = None
    repo: str | None = None
    due_date: datetime | None = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return _validate_project_name(value)

    @field_validator('description', 'avatar', 'report_url', 'report_name', 'repo')
    @classmethod
    def validate_optional_text(cls, value: str | None) -> str | None:
        return normalize_optional_text(value)


class ProjectSearchRequest(ApiModel):
    search_text: str = ''
    offset: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)


class ShortProjectResponse(ApiModel):
    id: int
    name: str
    description: str | None = None
    avatar: str | None = None
    due_date: datetime | None = None


class ProjectResponse(ShortProjectResponse):
    report_url: str | None = None
    report_name: str | None = None
    repo: str | None = None


class ProjectWithParticipantsResponse(ProjectResponse):
    participants: list[ParticipantResponse]


class ProjectInfoResponse(ProjectResponse):
    participants: list[ParticipantResponse]
    tasks: list[ShortTaskResponse]


class CreateProjectResponse(ProjectResponse):
    participant: ParticipantResponse
