import asyncio
import json

from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import OperationalError

from project_monitoring.main import app, database_error_handler, request_validation_error_handler


def _route_signatures() -> set[tuple[str, str]]:
    signatures = set()
    for route in app.routes:
        for method in getattr(route, 'methods', None) or ():
            signatures.add((method, route.path))
    return signatures


def test_api_routes_are_registered() -> None:
    signatures = _route_signatures()

    assert {
        ('POST', '/api/register'),
        ('POST', '/api/auth'),
        ('GET', '/api/user/{user_id}'),
        ('POST', '/api/pm/'),
        ('GET', '/api/project/{project_id}'),
        ('PUT', '/api/project/{project_id}'),
        ('DELETE', '/api/project/{project_id}'),
        ('POST', '/api/project/{project_id}/'),
        ('DELETE', '/api/project/{project_id}/{user_id}'),
        ('POST', '/api/project/{project_id}/task/'),
        ('PUT', '/api/project/{project_id}/task/{task_id}'),
        ('GET', '/api/admin/projects'),
    } <= signatures


def test_request_validation_errors_are_bad_requests() -> None:
    exc = RequestValidationError([{'loc': ('body', 'status'), 'msg': 'Input should be BACKLOG', 'type': 'enum'}])

    response = asyncio.run(request_validation_error_handler(None, exc))

    assert response.status_code == 400
    assert json.loads(response.body)['detail'][0]['loc'] == ['body', 'status']


def test_database_errors_are_service_unavailable() -> None:
    class _FakeRequest:
        method = 'GET'
        url = type('Url', (), {'path': '/api/project/1'})()

    response = asyncio.run(database_error_handler(_FakeRequest(), OperationalError('SELECT 1', {}, Exception('down'))))

    assert response.status_code == 503
