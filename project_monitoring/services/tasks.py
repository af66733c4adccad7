import logging
import uuid

from sqlalchemy.orm import Session

from project_monitoring.auth.policy import get_participant
from project_monitoring.core.errors import InvalidInputError, NotFoundError
from project_monitoring.models.participant import Participant
from project_monitoring.models.task import Task
from project_monitoring.schemas.task import CreateTaskRequest, TaskPatch, TaskSearchRequest
from project_monitoring.services.common import apply_changes, collect_changes, commit, paginate
from project_monitoring.services.projects import get_project

logger = logging.getLogger(__name__)

TASK_PATCH_COLUMNS = {
    'title': 'name',
    'estimated_time': 'estimate',
}


def resolve_assignee(db: Session, project_id: int, user_id: uuid.UUID | None) -> Participant | None:
    """Map an assignee user id to that user's participant row in ``project_id``."""
    if user_id is None:
        return None
    participant = get_participant(db, user_id, project_id)
    if participant is None:
        raise InvalidInputError('Assignee must be a participant of the project.')
    return participant


def get_task(db: Session, task_id: int, project_id: int | None = None) -> Task:
    task = db.get(Task, task_id)
    if task is None or (project_id is not None and task.project_id != project_id):
        raise NotFoundError('Task not found.')
    return task


def create_task(db: Session, project_id: int, creator_id: uuid.UUID, data: CreateTaskRequest) -> Task:
    get_project(db, project_id)
    assignee = resolve_assignee(db, project_id, data.assignee)

    task = Task(
        project_id=project_id,
        name=data.title,
        description=data.description,
        participant_id=assignee.id if assignee else None,
        creator_id=creator_id,
        status=data.status.value,
        estimate=data.estimated_time,
    )
    db.add(task)
    commit(db)
    db.refresh(task)

    logger.info('Task %s created in project %s', task.id, project_id)
    return task


def update_task(db: Session, project_id: int, task_id: int, patch: TaskPatch) -> Task:
    task = get_task(db, task_id, project_id)
    changes = collect_changes(patch, required=('title', 'status'))

    if 'assignee' in changes:
        assignee = resolve_assignee(db, task.project_id, changes.pop('assignee'))
        task.participant_id = assignee.id if assignee else None

    apply_changes(task, changes, TASK_PATCH_COLUMNS)
    commit(db)
    db.refresh(task)
    return task


def delete_task(db: Session, project_id: int, task_id: int) -> None:
    task = get_task(db, task_id, project_id)
    db.delete(task)
    commit(db)
    logger.info('Task %s deleted from project %s', task_id, project_id)


def get_tasks(db: Session, project_id: int, request: TaskSearchRequest) -> tuple[list[Task], int]:
    query = db.query(Task).filter(Task.project_id == project_id)
    if request.status is not None:
        query = query.filter(Task.status == request.status.value)
    if request.assignee is not None:
        query = query.join(Participant, Task.participant_id == Participant.id).filter(
            Participant.user_id == request.assignee,
        )
    return paginate(query.order_by(Task.id.asc()), request.offset, request.limit)
