import uuid

from pydantic import field_validator

from project_monitoring.models.participant import ParticipantRole
from project_monitoring.schemas.base import ApiModel
from project_monitoring.schemas.user import ShortUserResponse


class AddParticipantRequest(ApiModel):
    user_id: uuid.UUID
    role: ParticipantRole = ParticipantRole.MEMBER

    @field_validator('role')
    @classmethod
    def validate_role(cls, value: ParticipantRole) -> ParticipantRole:
        if value is ParticipantRole.OWNER:
            raise ValueError('A project has exactly one owner; the owner role cannot be granted.')
        return value


class ParticipantResponse(ApiModel):
    id: int
    role: ParticipantRole
    project_id: int
    user: ShortUserResponse
