import logging
import secrets
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from project_monitoring.auth import tokens
from project_monitoring.auth.passwords import hash_password, verify_password
from project_monitoring.core.errors import ConflictError, InvalidInputError, NotFoundError, UnauthorizedError
from project_monitoring.models.user import User, UserRole
from project_monitoring.schemas.user import RegisterRequest, UserPatch, UserSearchRequest
from project_monitoring.services.common import apply_changes, collect_changes, commit, paginate

logger = logging.getLogger(__name__)

SELF_REGISTERED_ROLES = {UserRole.STUDENT, UserRole.PROJECT_MANAGER}
USER_PATCH_COLUMNS = {'group': 'group_name'}


def generate_color_code() -> str:
    return f'#{secrets.randbelow(0x1000000):06x}'


def get_user(db: Session, user_id: uuid.UUID) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError('User not found.')
    return user


def _ensure_unique(db: Session, username: str | None = None, email: str | None = None, exclude_id=None) -> None:
    if username is not None:
        query = db.query(User).filter(User.username == username)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise ConflictError('Username is already taken.')
    if email is not None:
        query = db.query(User).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise ConflictError('Email is already registered.')


def create_user(db: Session, data: RegisterRequest, allow_admin: bool = False) -> tuple[User, str]:
    """Register an account and return it together with a fresh access token."""
    if data.role not in SELF_REGISTERED_ROLES and not allow_admin:
        raise InvalidInputError('Admin accounts cannot be self-registered.')

    _ensure_unique(db, username=data.username, email=data.email)

    user = User(
        role=data.role.value,
        color_code=generate_color_code(),
        email=data.email,
        username=data.username,
        first_name=data.first_name,
        last_name=data.last_name,
        group_name=data.group,
        github_username=data.github_username,
        hashed_password=hash_password(data.password),
    )
    db.add(user)
    commit(db, conflict_detail='Username or email is already registered.')
    db.refresh(user)

    logger.info('Registered user %s with role %s', user.id, user.role)
    return user, tokens.issue_token(user)


def authenticate(db: Session, username: str, password: str) -> str:
    user = db.query(User).filter(User.username == username.strip().lower()).first()
    if user is None or not verify_password(user.hashed_password, password):
        raise UnauthorizedError('Invalid username or password.')
    return tokens.issue_token(user)


def search_users(db: Session, request: UserSearchRequest) -> tuple[list[User], int]:
    query = db.query(User)
    search_text = request.search_text.strip()
    if search_text:
        query = query.filter(
            or_(
                User.username.icontains(search_text, autoescape=True),
                User.first_name.icontains(search_text, autoescape=True),
                User.last_name.icontains(search_text, autoescape=True),
                User.github_username.icontains(search_text, autoescape=True),
            )
        )
    if request.role is not None:
        query = query.filter(User.role == request.role.value)

    return paginate(query.order_by(User.username.asc()), request.offset, request.limit)


def update_user(db: Session, user_id: uuid.UUID, patch: UserPatch) -> User:
    user = get_user(db, user_id)
    changes = collect_changes(patch, required=('email', 'password'))

    if 'email' in changes:
        _ensure_unique(db, email=changes['email'], exclude_id=user.id)
    if 'password' in changes:
        user.hashed_password = hash_password(changes.pop('password'))

    apply_changes(user, changes, USER_PATCH_COLUMNS)
    commit(db, conflict_detail='Email is already registered.')
    db.refresh(user)
    return user
