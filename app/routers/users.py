from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.core.exceptions import ForbiddenError
from app.database import get_db
from app.routers.auth_deps import ensure_admin, ensure_correct_user_or_admin
from app.schemas.auth import TokenData
from app.schemas.user import (
    UserNew,
    UserUpdate,
    ApplicationRequest,
    UserEnvelope,
    UserDetailEnvelope,
    UserListEnvelope,
    UserWithToken,
    UserDeleted,
    ApplicationResult,
)
from app.services import auth as auth_service
from app.services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"]
)


@router.post(
    "",
    response_model=UserWithToken,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_user(user_in: UserNew, db: Session = Depends(get_db)):
    """
    Admin-only account creation, which may create other admins.
    Returns the user and a token for them.
    """
    user = UserService.register(db, **user_in.model_dump())
    return {"user": user, "token": auth_service.create_token(user)}


@router.get("", response_model=UserListEnvelope, dependencies=[Depends(ensure_admin)])
def list_users(db: Session = Depends(get_db)):
    return {"users": UserService.find_all(db)}


@router.get("/{username}", response_model=UserDetailEnvelope)
def get_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(ensure_correct_user_or_admin),
):
    """
    Profile plus the jobs this user has applied to.
    """
    return {"user": UserService.get(db, username)}


@router.patch("/{username}", response_model=UserEnvelope)
def update_user(
    username: str,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(ensure_correct_user_or_admin),
):
    """
    Update some of firstName, lastName, password and email.
    Only admins may change isAdmin.
    """
    data = user_in.model_dump(exclude_unset=True, by_alias=True)
    if "isAdmin" in data and not current_user.is_admin:
        raise ForbiddenError("Only admins may change admin status.")
    return {"user": UserService.update(db, username, data)}


@router.delete("/{username}", response_model=UserDeleted)
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(ensure_correct_user_or_admin),
):
    UserService.remove(db, username)
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}", response_model=ApplicationResult)
def apply_to_job(
    username: str,
    job_id: int,
    application_in: Optional[ApplicationRequest] = Body(None),
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(ensure_correct_user_or_admin),
):
    """
    Record an application. The body is optional: `{ "state": "interested" }`.
    """
    application_in = application_in or ApplicationRequest()
    application = UserService.apply_to_job(db, username, job_id, application_in.state)
    return {"applied": application.job_id}
