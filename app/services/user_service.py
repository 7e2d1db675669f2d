import logging
from typing import Any, Dict, List

from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from app.core.sql import sql_for_partial_update, typed_bindparams
from app.models.application import Application, ApplicationState
from app.models.job import Job
from app.models.user import User
from app.services import auth as auth_service

logger = logging.getLogger(__name__)

USER_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


class UserService:
    @staticmethod
    def authenticate(db: Session, username: str, password: str) -> User:
        """Return the user when the password matches; UnauthorizedError otherwise."""
        user = db.get(User, username)
        if user is not None and auth_service.verify_password(password, user.password):
            return user

        logger.warning(f"Failed login for {username}")
        raise UnauthorizedError("Invalid username/password")

    @staticmethod
    def register(
        db: Session,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
        is_admin: bool = False,
    ) -> User:
        if db.get(User, username) is not None:
            raise BadRequestError(f"Duplicate username: {username}")

        user = User(
            username=username,
            password=auth_service.get_password_hash(password),
            first_name=first_name,
            last_name=last_name,
            email=email,
            is_admin=is_admin,
        )
        db.add(user)
        db.commit()
        db.refresh(user)

        logger.info(f"Registered user {username}{' as admin' if is_admin else ''}")
        return user

    @staticmethod
    def find_all(db: Session) -> List[User]:
        return db.query(User).order_by(User.username).all()

    @staticmethod
    def get(db: Session, username: str) -> Dict[str, Any]:
        """User profile plus the jobs applied to, newest job id last."""
        user = db.get(User, username)
        if user is None:
            raise NotFoundError(f"No user: {username}")

        applications = (
            db.query(Application)
            .join(Job, Application.job_id == Job.id)
            .filter(Application.username == username)
            .order_by(Job.id)
            .all()
        )
        return {
            "username": user.username,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": user.email,
            "is_admin": user.is_admin,
            "jobs": [
                {
                    "id": app.job.id,
                    "title": app.job.title,
                    "company_handle": app.job.company_handle,
                    "company_name": app.job.company.name,
                    "state": app.state,
                }
                for app in applications
            ],
        }

    @staticmethod
    def update(db: Session, username: str, data: Dict[str, Any]) -> User:
        """
        Partial update keyed by API field names. A new password is hashed
        before it reaches the statement.
        """
        data = dict(data)
        if data.get("password"):
            data["password"] = auth_service.get_password_hash(data["password"])

        set_cols, values = sql_for_partial_update(data, USER_COLUMNS)
        stmt = text(
            f"UPDATE users SET {set_cols} WHERE username = :lookup_username"
        ).bindparams(*typed_bindparams(User.__table__, values))

        result = db.execute(stmt, {**values, "lookup_username": username})
        if result.rowcount == 0:
            db.rollback()
            raise NotFoundError(f"No user: {username}")
        db.commit()

        return db.get(User, username)

    @staticmethod
    def remove(db: Session, username: str) -> None:
        user = db.get(User, username)
        if user is None:
            raise NotFoundError(f"No user: {username}")

        db.delete(user)
        db.commit()
        logger.info(f"Deleted user {username}")

    @staticmethod
    def apply_to_job(
        db: Session,
        username: str,
        job_id: int,
        state: ApplicationState = ApplicationState.APPLIED,
    ) -> Application:
        if db.get(Job, job_id) is None:
            raise NotFoundError(f"No job: {job_id}")
        if db.get(User, username) is None:
            raise NotFoundError(f"No user: {username}")
        if db.get(Application, (username, job_id)) is not None:
            raise BadRequestError(f"Already applied to job: {job_id}")

        application = Application(username=username, job_id=job_id, state=state)
        db.add(application)
        db.commit()
        db.refresh(application)

        logger.info(f"{username} applied to job {job_id} ({application.state.value})")
        return application
