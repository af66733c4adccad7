import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from project_monitoring.auth.dependencies import require_project_role
from project_monitoring.database import get_db
from project_monitoring.models.task import TaskStatus
from project_monitoring.models.user import User
from project_monitoring.responses import build_task_info, make_task_response
from project_monitoring.schemas.task import (
    CreateTaskRequest,
    TaskInfoResponse,
    TaskListResponse,
    TaskPatch,
    TaskResponse,
    TaskSearchRequest,
)
from project_monitoring.services import tasks

participant_access = require_project_role()

router = APIRouter(tags=['tasks'])


@router.get('/', response_model=TaskListResponse)
def get_tasks(
    project_id: int,
    task_status: TaskStatus | None = Query(default=None, alias='status'),
    assignee: uuid.UUID | None = Query(default=None),
    offset: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=1),
    current_user: User = Depends(participant_access),
    db: Session = Depends(get_db),
):
    request = TaskSearchRequest(status=task_status, assignee=assignee, offset=offset, limit=limit)
    found_tasks, count = tasks.get_tasks(db, project_id, request)
    return TaskListResponse(tasks=[make_task_response(task) for task in found_tasks], count=count)


@router.post('/', response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    project_id: int,
    data: CreateTaskRequest,
    current_user: User = Depends(participant_access),
    db: Session = Depends(get_db),
):
    task = tasks.create_task(db, project_id, current_user.id, data)
    return make_task_response(task)


@router.get('/{task_id}', response_model=TaskInfoResponse)
def get_task_info(
    project_id: int,
    task_id: int,
    current_user: User = Depends(participant_access),
    db: Session = Depends(get_db),
):
    return build_task_info(db, project_id, task_id)


@router.put('/{task_id}', response_model=TaskResponse)
def update_task(
    project_id: int,
    task_id: int,
    patch: TaskPatch,
    current_user: User = Depends(participant_access),
    db: Session = Depends(get_db),
):
    return make_task_response(tasks.update_task(db, project_id, task_id, patch))


@router.delete('/{task_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    project_id: int,
    task_id: int,
    current_user: User = Depends(participant_access),
    db: Session = Depends(get_db),
):
    tasks.delete_task(db, project_id, task_id)
