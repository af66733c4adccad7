"""Builds the read views returned by the API.

Every entity has a short projection for lists and nested collections and a
full one for detail views. Nothing here ever reads ``hashed_password``.
"""

import uuid

from sqlalchemy.orm import Session

from project_monitoring.models.participant import Participant
from project_monitoring.models.project import Project
from project_monitoring.models.task import Task
from project_monitoring.models.user import User
from project_monitoring.schemas.participant import ParticipantResponse
from project_monitoring.schemas.profile import ProfileProjectResponse, ProfileResponse
from project_monitoring.schemas.project import (
    CreateProjectResponse,
    ProjectInfoResponse,
    ProjectResponse,
    ProjectWithParticipantsResponse,
    ShortProjectResponse,
)
from project_monitoring.schemas.task import ShortTaskResponse, TaskInfoResponse, TaskResponse
from project_monitoring.schemas.user import ShortUserResponse, UserResponse
from project_monitoring.services import participants, projects, tasks, users


def make_short_user_response(user: User) -> ShortUserResponse:
    return ShortUserResponse(
        id=user.id,
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        color_code=user.color_code,
    )


def make_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        color_code=user.color_code,
        email=user.email,
        role=user.role,
        group=user.group_name,
        github_username=user.github_username,
    )


def _short_project_fields(project: Project) -> dict:
    return {
        'id': project.id,
        'name': project.name,
        'description': project.description,
        'avatar': project.photo_url,
        'due_date': project.due_date,
    }


def _project_fields(project: Project) -> dict:
    return {
        **_short_project_fields(project),
        'report_url': project.report_url,
        'report_name': project.report_name,
        'repo': project.repo_url,
    }


def make_short_project_response(project: Project) -> ShortProjectResponse:
    return ShortProjectResponse(**_short_project_fields(project))


def make_project_response(project: Project) -> ProjectResponse:
    return ProjectResponse(**_project_fields(project))


def make_participant_response(participant: Participant) -> ParticipantResponse:
    return ParticipantResponse(
        id=participant.id,
        role=participant.role,
        project_id=participant.project_id,
        user=make_short_user_response(participant.user),
    )


def make_participant_responses(project_participants: list[Participant]) -> list[ParticipantResponse]:
    return [make_participant_response(participant) for participant in project_participants]


def _short_task_fields(task: Task) -> dict:
    return {
        'id': task.id,
        'title': task.name,
        'description': task.description,
        'assignee': task.participant.user_id if task.participant else None,
        'creator_id': task.creator_id,
        'status': task.status,
        'estimated_time': task.estimate,
        'created_at': task.created_at,
        'updated_at': task.updated_at,
    }


def make_short_task_response(task: Task) -> ShortTaskResponse:
    return ShortTaskResponse(**_short_task_fields(task))


def make_task_response(task: Task) -> TaskResponse:
    return TaskResponse(**_short_task_fields(task), project_id=task.project_id)


def make_project_with_participants_response(db: Session, project: Project) -> ProjectWithParticipantsResponse:
    return ProjectWithParticipantsResponse(
        **_project_fields(project),
        participants=make_participant_responses(participants.get_participants(db, project.id)),
    )


def make_create_project_response(project: Project, owner: Participant) -> CreateProjectResponse:
    return CreateProjectResponse(
        **_project_fields(project),
        participant=make_participant_response(owner),
    )


def build_project_info(db: Session, project_id: int) -> ProjectInfoResponse:
    """Project, participants and short tasks from three separate reads.

    The reads are not wrapped in one transaction; a concurrent write between
    them can show up in one collection and not yet in another.
    """
    project = projects.get_project(db, project_id)
    project_participants = participants.get_participants(db, project_id)
    project_tasks = db.query(Task).filter(Task.project_id == project_id).order_by(Task.id.asc()).all()

    return ProjectInfoResponse(
        **_project_fields(project),
        participants=make_participant_responses(project_participants),
        tasks=[make_short_task_response(task) for task in project_tasks],
    )


def build_task_info(db: Session, project_id: int, task_id: int) -> TaskInfoResponse:
    task = tasks.get_task(db, task_id, project_id)
    return TaskInfoResponse(
        **_short_task_fields(task),
        project_id=task.project_id,
        creator=make_short_user_response(task.creator) if task.creator else None,
        assignee_user=make_short_user_response(task.participant.user) if task.participant else None,
    )


def build_profile(db: Session, user_id: uuid.UUID) -> ProfileResponse:
    user = users.get_user(db, user_id)
    user_projects = projects.get_user_projects(db, user_id)
    return ProfileResponse(
        **make_user_response(user).model_dump(),
        projects=[
            ProfileProjectResponse(**_short_project_fields(project), role=role)
            for project, role in user_projects
        ],
    )
