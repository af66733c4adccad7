import uuid

import pytest

from project_monitoring.core.errors import ConflictError, InvalidInputError, NotFoundError
from project_monitoring.models.participant import ParticipantRole
from project_monitoring.models.task import Task
from project_monitoring.services import participants


def test_add_participant_stores_role(db, make_user, make_project) -> None:
    project = make_project(owner=make_user())
    newcomer = make_user()

    participant = participants.add_participant(db, project.id, newcomer.id, ParticipantRole.TEAMLEAD)

    assert participant.role == ParticipantRole.TEAMLEAD.value
    assert participants.get_participant_by_id(db, participant.id).user_id == newcomer.id


def test_add_participant_twice_is_conflict(db, make_user, make_project) -> None:
    project = make_project(owner=make_user())
    newcomer = make_user()
    participants.add_participant(db, project.id, newcomer.id)

    with pytest.raises(ConflictError) as exception_info:
        participants.add_participant(db, project.id, newcomer.id)

    assert exception_info.value.status_code == 409


def test_add_participant_cannot_grant_owner(db, make_user, make_project) -> None:
    project = make_project(owner=make_user())

    with pytest.raises(InvalidInputError):
        participants.add_participant(db, project.id, make_user().id, ParticipantRole.OWNER)


def test_add_participant_to_missing_project_or_user(db, make_user, make_project) -> None:
    project = make_project(owner=make_user())

    with pytest.raises(NotFoundError):
        participants.add_participant(db, 999, make_user().id)
    with pytest.raises(NotFoundError):
        participants.add_participant(db, project.id, uuid.uuid4())


def test_get_participant_by_id_missing(db) -> None:
    with pytest.raises(NotFoundError):
        participants.get_participant_by_id(db, 1)


def test_delete_participant_unassigns_their_tasks(db, make_user, make_project, add_member, make_task) -> None:
    owner = make_user()
    member = make_user()
    project = make_project(owner=owner)
    membership = add_member(project, member)
    task = make_task(project, owner, participant_id=membership.id)

    participants.delete_participant(db, member.id, project.id)

    assert [p.user_id for p in participants.get_participants(db, project.id)] == [owner.id]
    assert db.get(Task, task.id).participant_id is None


def test_delete_participant_refuses_owner(db, make_user, make_project) -> None:
    owner = make_user()
    project = make_project(owner=owner)

    with pytest.raises(InvalidInputError) as exception_info:
        participants.delete_participant(db, owner.id, project.id)

    assert exception_info.value.detail == 'The project owner cannot be removed.'


def test_delete_missing_participant_is_not_found(db, make_user, make_project) -> None:
    project = make_project(owner=make_user())

    with pytest.raises(NotFoundError):
        participants.delete_participant(db, make_user().id, project.id)
