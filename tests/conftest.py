import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')

from project_monitoring.database import Base, enable_sqlite_foreign_keys  # noqa: E402
from project_monitoring.models.participant import Participant, ParticipantRole  # noqa: E402
from project_monitoring.models.project import Project  # noqa: E402
from project_monitoring.models.task import Task  # noqa: E402
from project_monitoring.models.user import User, UserRole  # noqa: E402


@pytest.fixture
def db():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def make_user(db):
    counter = {'value': 0}

    def factory(role: UserRole = UserRole.STUDENT, username: str | None = None) -> User:
        counter['value'] += 1
        name = username or f'user{counter["value"]}'
        user = User(
            role=role.value,
            email=f'{name}@example.edu',
            username=name,
            first_name=name.title(),
            last_name='Tester',
            hashed_password='not-a-real-hash',
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return factory


@pytest.fixture
def make_project(db):
    def factory(owner: User | None = None, name: str = 'Apollo') -> Project:
        project = Project(name=name, description='Moon landing tracker')
        db.add(project)
        db.commit()
        db.refresh(project)
        if owner is not None:
            db.add(Participant(project_id=project.id, user_id=owner.id, role=ParticipantRole.OWNER.value))
            db.commit()
        return project

    return factory


@pytest.fixture
def add_member(db):
    def factory(project: Project, user: User, role: ParticipantRole = ParticipantRole.MEMBER) -> Participant:
        participant = Participant(project_id=project.id, user_id=user.id, role=role.value)
        db.add(participant)
        db.commit()
        db.refresh(participant)
        return participant

    return factory


@pytest.fixture
def make_task(db):
    def factory(project: Project, creator: User, title: str = 'Write report', **fields) -> Task:
        task = Task(project_id=project.id, name=title, creator_id=creator.id, **fields)
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    return factory
