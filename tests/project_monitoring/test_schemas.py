import pytest
from pydantic import ValidationError

from project_monitoring.models.task import TaskStatus
from project_monitoring.schemas.project import CreateProjectRequest, ProjectPatch
from project_monitoring.schemas.task import CreateTaskRequest, TaskPatch
from project_monitoring.schemas.user import RegisterRequest, UserPatch


def test_create_project_request_requires_name() -> None:
    with pytest.raises(ValidationError):
        CreateProjectRequest(name='   ')


def test_create_project_request_accepts_wire_names() -> None:
    request = CreateProjectRequest.model_validate({'name': 'Apollo', 'dueDate': '2026-05-01T12:00:00', 'avatar': ' '})

    assert request.due_date.year == 2026
    assert request.avatar is None


def test_patch_tracks_only_sent_fields() -> None:
    patch = ProjectPatch.model_validate({'reportUrl': 'https://r', 'description': None})

    assert patch.model_dump(exclude_unset=True) == {'report_url': 'https://r', 'description': None}


@pytest.mark.parametrize('status', ['BACKLOG', 'IN_PROGRESS', 'REVIEW', 'DONE'])
def test_task_status_accepts_known_literals(status: str) -> None:
    assert TaskPatch.model_validate({'status': status}).status == TaskStatus(status)


def test_task_status_rejects_unknown_literal() -> None:
    with pytest.raises(ValidationError):
        CreateTaskRequest.model_validate({'title': 'Test', 'status': 'TESTING'})


def test_register_request_normalizes_and_validates() -> None:
    request = RegisterRequest(username=' Ada ', email='ADA@Example.edu', password='long-enough', github_username='  ')

    assert request.username == 'ada'
    assert request.email == 'ada@example.edu'
    assert request.github_username is None
    with pytest.raises(ValidationError):
        RegisterRequest(username='ada', email='ada@example.edu', password='short')


def test_project_patch_turns_blank_text_into_null() -> None:
    patch = ProjectPatch.model_validate({'description': '   ', 'avatar': '', 'repo': ' https://github.com/org/apollo '})

    assert patch.model_dump(exclude_unset=True) == {
        'description': None,
        'avatar': None,
        'repo': 'https://github.com/org/apollo',
    }


def test_user_patch_normalizes_profile_text_like_registration() -> None:
    patch = UserPatch.model_validate({'firstName': '  ', 'group': ' CS-486 '})

    assert patch.model_dump(exclude_unset=True) == {'first_name': None, 'group': 'CS-486'}
