import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from project_monitoring.core.errors import DatabaseUnavailableError, InvalidInputError, NotFoundError
from project_monitoring.models.participant import Participant, ParticipantRole
from project_monitoring.models.project import Project
from project_monitoring.models.task import Task
from project_monitoring.schemas.project import CreateProjectRequest, ProjectPatch, ProjectSearchRequest
from project_monitoring.services.common import apply_changes, collect_changes, commit, paginate

logger = logging.getLogger(__name__)

PROJECT_PATCH_COLUMNS = {
    'avatar': 'photo_url',
    'repo': 'repo_url',
}


class ProjectCreationError(DatabaseUnavailableError):
    """The project row itself could not be stored."""


class OwnerAssignmentError(DatabaseUnavailableError):
    """The project was stored but its owner could not be; the whole creation was rolled back."""


def get_project(db: Session, project_id: int) -> Project:
    project = db.get(Project, project_id)
    if project is None:
        raise NotFoundError('Project not found.')
    return project


def create_project(db: Session, data: CreateProjectRequest, commit_changes: bool = True) -> Project:
    name = (data.name or '').strip()
    if not name:
        raise InvalidInputError('Project name is required.')

    project = Project(
        name=name,
        description=data.description,
        photo_url=data.avatar,
        due_date=data.due_date,
    )
    db.add(project)
    if commit_changes:
        commit(db)
        db.refresh(project)
    else:
        db.flush()
    return project


def create_project_with_owner(db: Session, data: CreateProjectRequest, owner_id: uuid.UUID) -> tuple[Project, Participant]:
    """Create a project and make ``owner_id`` its owner in a single transaction.

    Each step fails with its own error; if the owner cannot be stored the
    project is rolled back as well, so no ownerless project is ever committed.
    """
    try:
        project = create_project(db, data, commit_changes=False)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Project creation failed')
        raise ProjectCreationError('Project could not be created.') from exc

    project_id = project.id
    owner = Participant(
        project_id=project_id,
        user_id=owner_id,
        role=ParticipantRole.OWNER.value,
    )
    try:
        db.add(owner)
        db.flush()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error('Owner assignment for new project %s failed; project creation rolled back', project_id)
        raise OwnerAssignmentError(
            'Project owner could not be assigned; the project was not created.'
        ) from exc

    db.refresh(project)
    db.refresh(owner)
    logger.info('Project %s created by %s', project.id, owner_id)
    return project, owner


def update_project(db: Session, project_id: int, patch: ProjectPatch) -> Project:
    project = get_project(db, project_id)
    changes = collect_changes(patch, required=('name',))
    apply_changes(project, changes, PROJECT_PATCH_COLUMNS)
    commit(db)
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: int) -> None:
    """Delete a project with its tasks and participants, all or nothing."""
    project = get_project(db, project_id)
    try:
        db.query(Task).filter(Task.project_id == project_id).delete(synchronize_session=False)
        db.query(Participant).filter(Participant.project_id == project_id).delete(synchronize_session=False)
        db.delete(project)
    except SQLAlchemyError as exc:
        db.rollback()
        raise DatabaseUnavailableError() from exc
    commit(db)
    logger.info('Project %s deleted', project_id)


def get_projects(db: Session, request: ProjectSearchRequest) -> tuple[list[Project], int]:
    query = db.query(Project)
    search_text = request.search_text.strip()
    if search_text:
        query = query.filter(Project.name.icontains(search_text, autoescape=True))
    return paginate(query.order_by(Project.id.asc()), request.offset, request.limit)


def get_user_projects(db: Session, user_id: uuid.UUID) -> list[tuple[Project, str]]:
    return (
        db.query(Project, Participant.role)
        .join(Participant, Participant.project_id == Project.id)
        .filter(Participant.user_id == user_id)
        .order_by(Project.id.asc())
        .all()
    )
