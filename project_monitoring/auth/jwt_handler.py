"""Access token encoding; the ``sub`` claim is the user id and nothing else."""

import uuid
from datetime import datetime, timedelta, timezone

import jwt

from project_monitoring.core import config


def create_access_token(user_id: uuid.UUID, expires_minutes: int | None = None) -> str:
    issued_at = datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(minutes=expires_minutes or config.JWT_EXPIRES_MINUTES)
    payload = {'sub': str(user_id), 'exp': expires_at, 'iat': issued_at}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> uuid.UUID:
    """Return the user id a token was issued for.

    Raises ``jwt.InvalidTokenError`` for a bad signature, an expired token, or
    a subject that is not a user id.
    """
    payload = jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={'require': ['sub', 'exp']},
    )
    try:
        return uuid.UUID(payload['sub'])
    except (TypeError, ValueError, AttributeError) as exc:
        raise jwt.InvalidTokenError('Token subject is not a user id') from exc
