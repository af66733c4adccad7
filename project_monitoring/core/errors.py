"""Error taxonomy shared by the token service, the role resolver and the domain services.

Each error is an ``HTTPException`` carrying its status code; FastAPI renders
it directly and non-HTTP callers match on the concrete class.
"""

from fastapi import HTTPException, status


class ServiceError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str, headers: dict[str, str] | None = None) -> None:
        super().__init__(status_code=type(self).status_code, detail=detail, headers=headers)


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = 'Not authenticated') -> None:
        super().__init__(detail, headers={'WWW-Authenticate': 'Bearer'})


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class InvalidInputError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class DatabaseUnavailableError(ServiceError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, detail: str = 'Database unavailable. Verify DATABASE_URL and database credentials.') -> None:
        super().__init__(detail)
