"""
Create a Jobly admin account.

    python -m scripts.create_admin <username> <password> [--email ...]
"""
import argparse
import logging
import sys

from app.core.exceptions import BadRequestError
from app.core.logging import setup_logging
from app.database import SessionLocal, init_db
from app.services.user_service import UserService

logger = logging.getLogger("scripts.create_admin")


def create_admin_user(
    username: str,
    password: str,
    email: str,
    first_name: str,
    last_name: str,
    session_factory=SessionLocal,
) -> int:
    db = session_factory()
    try:
        init_db(bind=db.get_bind())
        UserService.register(
            db,
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name,
            email=email,
            is_admin=True,
        )
        logger.info(f"Admin user '{username}' created.")
        return 0
    except BadRequestError as e:
        logger.warning(e.message)
        return 1
    finally:
        db.close()


def main(argv=None, session_factory=SessionLocal) -> int:
    parser = argparse.ArgumentParser(description="Create a Jobly admin account.")
    parser.add_argument("username")
    parser.add_argument("password")
    parser.add_argument("--email", default=None)
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")
    args = parser.parse_args(argv)

    setup_logging()
    return create_admin_user(
        username=args.username,
        password=args.password,
        email=args.email or f"{args.username}@jobly.local",
        first_name=args.first_name,
        last_name=args.last_name,
        session_factory=session_factory,
    )


if __name__ == "__main__":
    sys.exit(main())
