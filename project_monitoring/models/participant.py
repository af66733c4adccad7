"""Participant model definitions."""

from enum import Enum

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from project_monitoring.database import Base
from project_monitoring.models.user import User


class ParticipantRole(str, Enum):
    """Project-scoped permission tier."""
    OWNER = "owner"
    TEAMLEAD = "teamlead"
    MEMBER = "member"


class Participant(Base):
    """Joins a user to a project with a project-scoped role."""
    __tablename__ = "participants"
    __table_args__ = (
        UniqueConstraint("user_id", "project_id", name="uq_participants_user_project"),
    )

    id = Column(Integer, primary_key=True, index=True)
    role = Column(String, nullable=False, default=ParticipantRole.MEMBER.value)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)

    user = relationship(User, lazy="joined")
