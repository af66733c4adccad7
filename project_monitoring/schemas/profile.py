from project_monitoring.models.participant import ParticipantRole
from project_monitoring.schemas.base import ApiModel
from project_monitoring.schemas.project import ShortProjectResponse
from project_monitoring.schemas.user import UserResponse


class ProfileProjectResponse(ShortProjectResponse):
    role: ParticipantRole


class ProfileResponse(UserResponse):
    projects: list[ProfileProjectResponse]
