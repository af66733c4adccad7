"""Provision an administrator account.

Admins cannot register through the API, so the first one is created here.

Usage:
    python -m project_monitoring.create_admin --username admin --email admin@example.com --password ...
"""
import argparse
import sys

from pydantic import ValidationError

from project_monitoring.core.errors import ServiceError
from project_monitoring.database import Base, SessionLocal, engine
from project_monitoring.models import participant, project, task, user  # noqa: F401
from project_monitoring.models.user import UserRole
from project_monitoring.schemas.user import RegisterRequest
from project_monitoring.services import users


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--username', required=True)
    parser.add_argument('--email', required=True)
    parser.add_argument('--password', required=True)
    parser.add_argument('--first-name')
    parser.add_argument('--last-name')
    args = parser.parse_args(argv)

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        data = RegisterRequest(
            username=args.username,
            email=args.email,
            password=args.password,
            first_name=args.first_name,
            last_name=args.last_name,
            role=UserRole.ADMIN,
        )
        admin, _ = users.create_user(db, data, allow_admin=True)
    except ValidationError as exc:
        print(f'Invalid admin details: {exc}', file=sys.stderr)
        return 1
    except ServiceError as exc:
        print(f'Could not create admin: {exc.detail}', file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f'Admin {admin.username} created with id {admin.id}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
