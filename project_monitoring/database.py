from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from project_monitoring.core import config


def _connect_args(database_url: str) -> dict:
    if database_url.startswith('sqlite'):
        return {'check_same_thread': False}
    if database_url.startswith('postgresql') and config.DB_STATEMENT_TIMEOUT_MS > 0:
        return {'options': f'-c statement_timeout={config.DB_STATEMENT_TIMEOUT_MS}'}
    return {}


def enable_sqlite_foreign_keys(target: Engine) -> None:
    @event.listens_for(target, 'connect')
    def _set_sqlite_pragma(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


engine = create_engine(
    config.DATABASE_URL,
    echo=config.DATABASE_ECHO,
    pool_pre_ping=True,
    connect_args=_connect_args(config.DATABASE_URL),
)

if engine.dialect.name == 'sqlite':
    enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
