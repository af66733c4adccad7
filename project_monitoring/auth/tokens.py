"""Token/identity service.

Tokens only identify a user. The global role is read from the ``users`` row on
every check, so a role or account change is visible on the next request.
"""

import logging
import uuid

import jwt
from sqlalchemy.orm import Session

from project_monitoring.auth import jwt_handler
from project_monitoring.core.errors import ForbiddenError, UnauthorizedError
from project_monitoring.models.user import User, UserRole

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    return jwt_handler.create_access_token(user.id)


def get_user_id_from_token(token: str) -> uuid.UUID:
    if not token:
        raise UnauthorizedError()
    try:
        return jwt_handler.decode_access_token(token)
    except jwt.InvalidTokenError as exc:
        raise UnauthorizedError('Invalid token') from exc


def resolve_user(db: Session, token: str) -> User:
    user = db.get(User, get_user_id_from_token(token))
    if user is None:
        raise UnauthorizedError('User not found')
    return user


def verify_token(db: Session, token: str, *allowed_roles: UserRole) -> User:
    """Resolve the caller and require one of ``allowed_roles``; no roles means any user."""
    user = resolve_user(db, token)
    if allowed_roles and user.role not in {role.value for role in allowed_roles}:
        logger.debug('User %s with role %s denied; requires one of %s', user.id, user.role, allowed_roles)
        raise ForbiddenError('Insufficient role.')
    return user


def verify_self(db: Session, token: str, target_user_id: uuid.UUID) -> User:
    user = resolve_user(db, token)
    if user.id != target_user_id:
        raise ForbiddenError('Users can only modify their own profile.')
    return user
