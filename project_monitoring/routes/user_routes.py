import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from project_monitoring.auth import tokens
from project_monitoring.auth.dependencies import get_current_user, get_token
from project_monitoring.core import config
from project_monitoring.database import get_db
from project_monitoring.models.user import UserRole
from project_monitoring.responses import build_profile, make_short_user_response, make_user_response
from project_monitoring.schemas.profile import ProfileResponse
from project_monitoring.schemas.user import ShortUserListResponse, UserPatch, UserResponse, UserSearchRequest
from project_monitoring.services import users

router = APIRouter(tags=['users'], dependencies=[Depends(get_current_user)])


@router.get('/', response_model=ShortUserListResponse)
def get_partial_users(
    search_param: str = Query(default='', alias='searchParam'),
    role: UserRole | None = Query(default=None),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=config.USERS_PAGE_LIMIT, ge=1, le=200),
    db: Session = Depends(get_db),
):
    request = UserSearchRequest(search_text=search_param, role=role, offset=offset, limit=limit)
    found_users, count = users.search_users(db, request)
    return ShortUserListResponse(
        users=[make_short_user_response(user) for user in found_users],
        count=count,
    )


@router.get('/{user_id}', response_model=ProfileResponse)
def get_user_profile(user_id: uuid.UUID, db: Session = Depends(get_db)):
    return build_profile(db, user_id)


@router.post('/{user_id}', response_model=UserResponse)
def update_self(
    user_id: uuid.UUID,
    patch: UserPatch,
    token: str = Depends(get_token),
    db: Session = Depends(get_db),
):
    tokens.verify_self(db, token, user_id)
    return make_user_response(users.update_user(db, user_id, patch))
