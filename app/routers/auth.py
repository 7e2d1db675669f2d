from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
import logging

from app.core.config import settings
from app.core.limiter import limiter
from app.database import get_db
from app.schemas.auth import Token, UserAuth, UserRegister
from app.services import auth as auth_service
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)


@router.post("/token", response_model=Token)
@limiter.limit(settings.login_rate_limit)
def login(request: Request, login_data: UserAuth, db: Session = Depends(get_db)):
    """
    { username, password } => { token }

    The token is used as `Authorization: Bearer <token>` on later requests.
    """
    user = UserService.authenticate(db, login_data.username, login_data.password)
    return {"token": auth_service.create_token(user)}


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(data: UserRegister, db: Session = Depends(get_db)):
    """
    { username, password, firstName, lastName, email } => { token }

    Self-service signup; the account is never an admin.
    """
    user = UserService.register(
        db,
        username=data.username,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        is_admin=False,
    )
    return {"token": auth_service.create_token(user)}
