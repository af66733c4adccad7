"""User model definitions."""

import uuid
from enum import Enum

from sqlalchemy import Column, String, Uuid
from project_monitoring.database import Base


class UserRole(str, Enum):
    """Global permission tier, fixed when the account is created."""
    STUDENT = "student"
    ADMIN = "admin"
    PROJECT_MANAGER = "project_manager"


class User(Base):
    """Represents an application user."""
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    role = Column(String, nullable=False, default=UserRole.STUDENT.value)
    color_code = Column(String)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String)
    last_name = Column(String)
    group_name = Column(String)
    github_username = Column(String)
    hashed_password = Column(String, nullable=False)
