from collections.abc import Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from project_monitoring.auth import policy, tokens
from project_monitoring.core.errors import UnauthorizedError
from project_monitoring.database import get_db
from project_monitoring.models.participant import ParticipantRole
from project_monitoring.models.user import User, UserRole

security = HTTPBearer(auto_error=False)


def get_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_token),
    db: Session = Depends(get_db),
) -> User:
    return tokens.resolve_user(db, token)


def require_global_roles(*allowed_roles: UserRole) -> Callable[..., User]:
    def dependency(
        token: str = Depends(get_token),
        db: Session = Depends(get_db),
    ) -> User:
        return tokens.verify_token(db, token, *allowed_roles)

    return dependency


def require_project_role(*allowed_roles: ParticipantRole) -> Callable[..., User]:
    """Admins pass; everybody else needs a participant row in ``project_id`` with an allowed role."""

    def dependency(
        project_id: int,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
    ) -> User:
        policy.authorize_project(db, current_user, project_id, *allowed_roles)
        return current_user

    return dependency
