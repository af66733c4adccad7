import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from project_monitoring.auth.dependencies import require_global_roles, require_project_role
from project_monitoring.database import get_db
from project_monitoring.models.participant import ParticipantRole
from project_monitoring.models.user import User, UserRole
from project_monitoring.responses import (
    build_project_info,
    make_create_project_response,
    make_participant_response,
    make_participant_responses,
    make_project_with_participants_response,
)
from project_monitoring.routes import task_routes
from project_monitoring.schemas.participant import AddParticipantRequest, ParticipantResponse
from project_monitoring.schemas.project import (
    CreateProjectRequest,
    CreateProjectResponse,
    ProjectInfoResponse,
    ProjectPatch,
    ProjectWithParticipantsResponse,
)
from project_monitoring.services import participants, projects

project_manager_access = require_global_roles(UserRole.PROJECT_MANAGER)
any_participant_access = require_project_role()
owner_access = require_project_role(ParticipantRole.OWNER)
team_management_access = require_project_role(ParticipantRole.OWNER, ParticipantRole.TEAMLEAD)

pm_router = APIRouter(tags=['projects'])
router = APIRouter(
    tags=['projects'],
    dependencies=[Depends(require_global_roles(UserRole.ADMIN, UserRole.PROJECT_MANAGER, UserRole.STUDENT))],
)


@pm_router.post('/', response_model=CreateProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    data: CreateProjectRequest,
    current_user: User = Depends(project_manager_access),
    db: Session = Depends(get_db),
):
    project, owner = projects.create_project_with_owner(db, data, current_user.id)
    return make_create_project_response(project, owner)


@router.get('/{project_id}', response_model=ProjectInfoResponse)
def get_project_info(
    project_id: int,
    current_user: User = Depends(any_participant_access),
    db: Session = Depends(get_db),
):
    return build_project_info(db, project_id)


@router.put('/{project_id}', response_model=ProjectWithParticipantsResponse)
def update_project(
    project_id: int,
    patch: ProjectPatch,
    current_user: User = Depends(owner_access),
    db: Session = Depends(get_db),
):
    project = projects.update_project(db, project_id, patch)
    return make_project_with_participants_response(db, project)


@router.delete('/{project_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: int,
    current_user: User = Depends(owner_access),
    db: Session = Depends(get_db),
):
    projects.delete_project(db, project_id)


@router.get('/{project_id}/participants', response_model=list[ParticipantResponse])
def get_participants(
    project_id: int,
    current_user: User = Depends(any_participant_access),
    db: Session = Depends(get_db),
):
    projects.get_project(db, project_id)
    return make_participant_responses(participants.get_participants(db, project_id))


@router.post('/{project_id}/', response_model=ParticipantResponse, status_code=status.HTTP_201_CREATED)
def add_participant(
    project_id: int,
    data: AddParticipantRequest,
    current_user: User = Depends(team_management_access),
    db: Session = Depends(get_db),
):
    participant = participants.add_participant(db, project_id, data.user_id, data.role)
    return make_participant_response(participant)


@router.delete('/{project_id}/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_participant(
    project_id: int,
    user_id: uuid.UUID,
    current_user: User = Depends(team_management_access),
    db: Session = Depends(get_db),
):
    participants.delete_participant(db, user_id, project_id)


router.include_router(task_routes.router, prefix='/{project_id}/task')
