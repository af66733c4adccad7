import pytest

from project_monitoring.core.errors import InvalidInputError, NotFoundError
from project_monitoring.models.task import TaskStatus
from project_monitoring.schemas.task import CreateTaskRequest, TaskPatch, TaskSearchRequest
from project_monitoring.services import tasks


def test_create_task_with_participant_assignee(db, make_user, make_project, add_member) -> None:
    owner = make_user()
    member = make_user()
    project = make_project(owner=owner)
    membership = add_member(project, member)

    task = tasks.create_task(db, project.id, owner.id, CreateTaskRequest(title='Draft plan', assignee=member.id))

    assert task.participant_id == membership.id
    assert task.creator_id == owner.id
    assert task.status == TaskStatus.BACKLOG.value


def test_create_task_rejects_non_participant_assignee(db, make_user, make_project) -> None:
    owner = make_user()
    project = make_project(owner=owner)

    with pytest.raises(InvalidInputError) as exception_info:
        tasks.create_task(db, project.id, owner.id, CreateTaskRequest(title='Draft', assignee=make_user().id))

    assert exception_info.value.detail == 'Assignee must be a participant of the project.'


def test_update_task_rejects_participant_of_other_project(db, make_user, make_project, make_task) -> None:
    owner = make_user()
    project = make_project(owner=owner, name='Here')
    elsewhere_owner = make_user()
    make_project(owner=elsewhere_owner, name='Elsewhere')
    task = make_task(project, owner)

    with pytest.raises(InvalidInputError):
        tasks.update_task(db, project.id, task.id, TaskPatch(assignee=elsewhere_owner.id))


def test_update_task_changes_only_sent_fields(db, make_user, make_project, make_task) -> None:
    owner = make_user()
    project = make_project(owner=owner)
    task = make_task(project, owner, description='Initial', estimate='2h')

    tasks.update_task(db, project.id, task.id, TaskPatch(status=TaskStatus.REVIEW))
    tasks.update_task(db, project.id, task.id, TaskPatch(status=TaskStatus.REVIEW))
    updated = tasks.get_task(db, task.id)

    assert updated.status == TaskStatus.REVIEW.value
    assert updated.name == 'Write report'
    assert updated.description == 'Initial'
    assert updated.estimate == '2h'


def test_update_task_allows_any_status_transition(db, make_user, make_project, make_task) -> None:
    owner = make_user()
    project = make_project(owner=owner)
    task = make_task(project, owner, status=TaskStatus.DONE.value)

    updated = tasks.update_task(db, project.id, task.id, TaskPatch(status=TaskStatus.BACKLOG))

    assert updated.status == TaskStatus.BACKLOG.value


def test_update_task_null_assignee_unassigns(db, make_user, make_project, add_member, make_task) -> None:
    owner = make_user()
    member = make_user()
    project = make_project(owner=owner)
    membership = add_member(project, member)
    task = make_task(project, owner, participant_id=membership.id)

    updated = tasks.update_task(db, project.id, task.id, TaskPatch(assignee=None))

    assert updated.participant_id is None


def test_update_task_refuses_to_clear_status(db, make_user, make_project, make_task) -> None:
    owner = make_user()
    project = make_project(owner=owner)
    task = make_task(project, owner)

    with pytest.raises(InvalidInputError):
        tasks.update_task(db, project.id, task.id, TaskPatch(status=None))


def test_task_lookup_is_scoped_to_project(db, make_user, make_project, make_task) -> None:
    owner = make_user()
    project = make_project(owner=owner, name='Home')
    other = make_project(owner=owner, name='Other')
    task = make_task(project, owner)

    with pytest.raises(NotFoundError):
        tasks.get_task(db, task.id, other.id)
    with pytest.raises(NotFoundError):
        tasks.delete_task(db, other.id, task.id)


def test_delete_task(db, make_user, make_project, make_task) -> None:
    owner = make_user()
    project = make_project(owner=owner)
    task = make_task(project, owner)

    task_id = task.id

    tasks.delete_task(db, project.id, task_id)

    with pytest.raises(NotFoundError):
        tasks.get_task(db, task_id)


def test_get_tasks_filters_by_status_and_assignee(db, make_user, make_project, add_member, make_task) -> None:
    owner = make_user()
    member = make_user()
    project = make_project(owner=owner)
    membership = add_member(project, member)
    assigned = make_task(project, owner, title='Assigned', participant_id=membership.id, status=TaskStatus.IN_PROGRESS.value)
    make_task(project, owner, title='Unassigned', status=TaskStatus.IN_PROGRESS.value)
    make_task(project, owner, title='Done', status=TaskStatus.DONE.value)

    in_progress, in_progress_count = tasks.get_tasks(db, project.id, TaskSearchRequest(status=TaskStatus.IN_PROGRESS))
    for_member, member_count = tasks.get_tasks(db, project.id, TaskSearchRequest(assignee=member.id))

    assert in_progress_count == 2
    assert {task.name for task in in_progress} == {'Assigned', 'Unassigned'}
    assert member_count == 1
    assert for_member[0].id == assigned.id
