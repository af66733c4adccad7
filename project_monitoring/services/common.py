"""Helpers shared by the domain services: sparse-patch application and commits."""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from project_monitoring.core.errors import ConflictError, DatabaseUnavailableError, InvalidInputError

logger = logging.getLogger(__name__)


def collect_changes(patch: BaseModel, required: Iterable[str] = ()) -> dict:
    """Return only the fields the caller actually sent.

    Fields in ``required`` map to non-nullable columns and may be changed but not cleared.
    """
    changes = patch.model_dump(exclude_unset=True)
    for field_name in required:
        if field_name in changes and changes[field_name] is None:
            raise InvalidInputError(f'{field_name} cannot be cleared.')
    return changes


def apply_changes(entity, changes: Mapping, columns: Mapping[str, str] | None = None) -> None:
    columns = columns or {}
    for field_name, value in changes.items():
        if isinstance(value, Enum):
            value = value.value
        setattr(entity, columns.get(field_name, field_name), value)


def commit(db: Session, conflict_detail: str = 'Conflicting record already exists.') -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(conflict_detail) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Commit failed')
        raise DatabaseUnavailableError() from exc


def paginate(query, offset: int = 0, limit: int | None = None):
    count = query.count()
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    return query.all(), count
