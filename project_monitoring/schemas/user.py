import uuid

from pydantic import Field, field_validator

from project_monitoring.models.user import UserRole
from project_monitoring.schemas.base import ApiModel, normalize_optional_text

MIN_PASSWORD_LENGTH = 8


class RegisterRequest(ApiModel):
    username: str
    email: str
    password: str
    first_name: str | None = None
    last_name: str | None = None
    group: str | None = None
    github_username: str | None = None
    role: UserRole = UserRole.STUDENT

    @field_validator('username')
    @classmethod
    def validate_username(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError('Username is required.')
        return normalized

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if '@' not in normalized:
            raise ValueError('A valid email is required.')
        return normalized

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters.')
        return value

    @field_validator('first_name', 'last_name', 'group', 'github_username')
    @classmethod
    def validate_profile_text(cls, value: str | None) -> str | None:
        return normalize_optional_text(value)


class LoginRequest(ApiModel):
    username: str
    password: str

    @field_validator('username')
    @classmethod
    def validate_username(cls, value: str) -> str:
        return value.strip().lower()


class UserPatch(ApiModel):
    """Sparse update of profile fields; omitted fields are left untouched.

    The global role is deliberately absent: it never changes after registration.
    """

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    group: str | None = None
    github_username: str | None = None
    password: str | None = None

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip().lower()
        if '@' not in normalized:
            raise ValueError('A valid email is required.')
        return normalized

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str | None) -> str | None:
        if value is not None and len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters.')
        return value

    @field_validator('first_name', 'last_name', 'group', 'github_username')
    @classmethod
    def validate_profile_text(cls, value: str | None) -> str | None:
        return normalize_optional_text(value)


class UserSearchRequest(ApiModel):
    search_text: str = ''
    role: UserRole | None = None
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=50, ge=1, le=200)


class ShortUserResponse(ApiModel):
    id: uuid.UUID
    username: str
    first_name: str | None = None
    last_name: str | None = None
    color_code: str | None = None


class UserResponse(ShortUserResponse):
    email: str
    role: UserRole
    group: str | None = None
    github_username: str | None = None


class AuthResponse(ApiModel):
    access_token: str
    token_type: str = 'bearer'


class RegisterResponse(AuthResponse):
    user: UserResponse


class UserListResponse(ApiModel):
    users: list[UserResponse]
    count: int


class ShortUserListResponse(ApiModel):
    users: list[ShortUserResponse]
    count: int
