"""Project model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from project_monitoring.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Project(Base):
    """Represents a tracked project; participants and tasks reference it by key."""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(String)
    photo_url = Column(String)
    report_url = Column(String)
    report_name = Column(String)
    repo_url = Column(String)
    due_date = Column(DateTime)
    created_at = Column(DateTime, default=_utcnow)
