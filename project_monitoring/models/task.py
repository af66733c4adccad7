"""Task model definitions."""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship
from project_monitoring.database import Base
from project_monitoring.models.participant import Participant
from project_monitoring.models.user import User


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(str, Enum):
    """Pipeline stages; any stage may follow any other."""
    BACKLOG = "BACKLOG"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    DONE = "DONE"


class Task(Base):
    """Represents a unit of work inside a project."""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(String)
    participant_id = Column(Integer, ForeignKey("participants.id", ondelete="SET NULL"), index=True)
    creator_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"))
    status = Column(String, nullable=False, default=TaskStatus.BACKLOG.value)
    estimate = Column(String)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    participant = relationship(Participant, lazy="joined")
    creator = relationship(User, lazy="joined")
