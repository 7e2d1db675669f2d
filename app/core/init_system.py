import logging
from app.core.config import settings
from app.database import SessionLocal
from app.models.user import User
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def init_system_data(session_factory=SessionLocal):
    """
    Creates the bootstrap admin named by ADMIN_USERNAME / ADMIN_PASSWORD,
    unless either is unset or the account already exists.
    """
    if not (settings.admin_username and settings.admin_password):
        logger.info("No bootstrap admin configured; skipping.")
        return

    db = session_factory()
    try:
        if db.get(User, settings.admin_username) is not None:
            logger.info(f"System initialization check: admin {settings.admin_username} exists.")
            return

        UserService.register(
            db,
            username=settings.admin_username,
            password=settings.admin_password,
            first_name="Admin",
            last_name="User",
            email=f"{settings.admin_username}@jobly.local",
            is_admin=True,
        )
        logger.info(f"✓ Created bootstrap admin: {settings.admin_username}")
    except Exception as e:
        db.rollback()
        logger.error(f"Error during system initialization check: {str(e)}", exc_info=True)
        raise
    finally:
        db.close()
