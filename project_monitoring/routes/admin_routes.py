import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from project_monitoring.auth.dependencies import require_global_roles
from project_monitoring.core import config
from project_monitoring.database import get_db
from project_monitoring.models.user import UserRole
from project_monitoring.responses import make_project_with_participants_response, make_user_response
from project_monitoring.schemas.project import ProjectSearchRequest, ProjectWithParticipantsResponse
from project_monitoring.schemas.user import UserListResponse, UserPatch, UserResponse, UserSearchRequest
from project_monitoring.services import projects, users

router = APIRouter(tags=['admin'], dependencies=[Depends(require_global_roles(UserRole.ADMIN))])


@router.get('/users', response_model=UserListResponse)
def get_full_users(
    search_param: str = Query(default='', alias='searchParam'),
    role: UserRole | None = Query(default=None),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=config.USERS_PAGE_LIMIT, ge=1, le=200),
    db: Session = Depends(get_db),
):
    request = UserSearchRequest(search_text=search_param, role=role, offset=offset, limit=limit)
    found_users, count = users.search_users(db, request)
    return UserListResponse(users=[make_user_response(user) for user in found_users], count=count)


@router.post('/users/{user_id}', response_model=UserResponse)
def update_user(user_id: uuid.UUID, patch: UserPatch, db: Session = Depends(get_db)):
    return make_user_response(users.update_user(db, user_id, patch))


@router.get('/projects', response_model=list[ProjectWithParticipantsResponse])
def get_projects(
    search_param: str = Query(default='', alias='searchParam'),
    db: Session = Depends(get_db),
):
    found_projects, _ = projects.get_projects(db, ProjectSearchRequest(search_text=search_param))
    return [make_project_with_participants_response(db, project) for project in found_projects]
