"""Project-scoped authorization.

Checks run as an ordered policy: the global admin bypass first, then the
participant role for the (user, project) pair. Both predicates are usable on
their own.
"""

import logging
import uuid

from sqlalchemy.orm import Session

from project_monitoring.core.errors import ForbiddenError
from project_monitoring.models.participant import Participant, ParticipantRole
from project_monitoring.models.user import User, UserRole

logger = logging.getLogger(__name__)


def has_admin_bypass(user: User) -> bool:
    return user.role == UserRole.ADMIN.value


def get_participant(db: Session, user_id: uuid.UUID, project_id: int) -> Participant | None:
    return db.query(Participant).filter(
        Participant.user_id == user_id,
        Participant.project_id == project_id,
    ).first()


def verify_participant(db: Session, user_id: uuid.UUID, project_id: int) -> Participant:
    participant = get_participant(db, user_id, project_id)
    if participant is None:
        logger.debug('User %s is not a participant of project %s', user_id, project_id)
        raise ForbiddenError('User is not a participant of this project.')
    return participant


def verify_participant_role(
    db: Session,
    user_id: uuid.UUID,
    project_id: int,
    *allowed_roles: ParticipantRole,
) -> Participant:
    """Require a participant row whose role is in ``allowed_roles``; no roles means any participant."""
    participant = verify_participant(db, user_id, project_id)
    if allowed_roles and participant.role not in {role.value for role in allowed_roles}:
        logger.debug(
            'Participant %s with role %s denied on project %s; requires one of %s',
            user_id, participant.role, project_id, allowed_roles,
        )
        raise ForbiddenError('Insufficient project role.')
    return participant


def authorize_project(db: Session, user: User, project_id: int, *allowed_roles: ParticipantRole) -> None:
    if has_admin_bypass(user):
        return
    verify_participant_role(db, user.id, project_id, *allowed_roles)
