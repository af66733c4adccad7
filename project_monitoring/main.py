import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from project_monitoring.core import config
from project_monitoring.core.logging_config import setup_logging
from project_monitoring.database import Base, engine
from project_monitoring.models import participant, project, task, user  # noqa: F401
from project_monitoring.routes import admin_routes, auth_routes, project_routes, user_routes

app = FastAPI(title='Project Monitoring API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_application() -> None:
    setup_logging()
    config.validate_runtime_config()
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error('Unhandled database error on %s %s: %s', request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={'detail': 'Database unavailable. Verify DATABASE_URL and database credentials.'},
    )


@app.get('/')
def root():
    return {'status': 'Project Monitoring API Running'}


app.include_router(auth_routes.router, prefix='/api')
app.include_router(user_routes.router, prefix='/api/user')
app.include_router(project_routes.pm_router, prefix='/api/pm')
app.include_router(project_routes.router, prefix='/api/project')
app.include_router(admin_routes.router, prefix='/api/admin')
