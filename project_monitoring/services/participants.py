import logging
import uuid

from sqlalchemy.orm import Session

from project_monitoring.auth.policy import get_participant
from project_monitoring.core.errors import ConflictError, InvalidInputError, NotFoundError
from project_monitoring.models.participant import Participant, ParticipantRole
from project_monitoring.models.task import Task
from project_monitoring.services.common import commit
from project_monitoring.services.projects import get_project
from project_monitoring.services.users import get_user

logger = logging.getLogger(__name__)


def add_participant(
    db: Session,
    project_id: int,
    user_id: uuid.UUID,
    role: ParticipantRole = ParticipantRole.MEMBER,
) -> Participant:
    if role is ParticipantRole.OWNER:
        raise InvalidInputError('A project has exactly one owner; the owner role cannot be granted.')

    get_project(db, project_id)
    get_user(db, user_id)
    if get_participant(db, user_id, project_id) is not None:
        raise ConflictError('User is already a participant of this project.')

    participant = Participant(project_id=project_id, user_id=user_id, role=role.value)
    db.add(participant)
    commit(db, conflict_detail='User is already a participant of this project.')
    db.refresh(participant)

    logger.info('User %s joined project %s as %s', user_id, project_id, participant.role)
    return participant


def get_participant_by_id(db: Session, participant_id: int) -> Participant:
    participant = db.get(Participant, participant_id)
    if participant is None:
        raise NotFoundError('Participant not found.')
    return participant


def get_participants(db: Session, project_id: int) -> list[Participant]:
    return db.query(Participant).filter(
        Participant.project_id == project_id,
    ).order_by(Participant.id.asc()).all()


def delete_participant(db: Session, user_id: uuid.UUID, project_id: int) -> None:
    participant = get_participant(db, user_id, project_id)
    if participant is None:
        raise NotFoundError('Participant not found.')
    if participant.role == ParticipantRole.OWNER.value:
        raise InvalidInputError('The project owner cannot be removed.')

    db.query(Task).filter(Task.participant_id == participant.id).update(
        {Task.participant_id: None},
        synchronize_session=False,
    )
    db.delete(participant)
    commit(db)
    logger.info('User %s removed from project %s', user_id, project_id)
