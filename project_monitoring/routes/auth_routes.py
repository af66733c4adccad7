from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from project_monitoring.database import get_db
from project_monitoring.responses import make_user_response
from project_monitoring.schemas.user import AuthResponse, LoginRequest, RegisterRequest, RegisterResponse
from project_monitoring.services import users

router = APIRouter(tags=['auth'])


@router.post('/register', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    user, token = users.create_user(db, data)
    return RegisterResponse(access_token=token, user=make_user_response(user))


@router.post('/auth', response_model=AuthResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    token = users.authenticate(db, data.username, data.password)
    return AuthResponse(access_token=token)
