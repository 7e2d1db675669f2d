"""
Password hashing (bcrypt via passlib) and JWT issue/verify (PyJWT).
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from passlib.context import CryptContext

from app.core.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_work_factor,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_token(user, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a token for a user row (or anything with username/is_admin).

    Claims: ``username``, ``isAdmin``, ``iat`` and ``exp``.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {
        "username": user.username,
        "isAdmin": bool(user.is_admin),
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Return the verified claims, or None for a bad, tampered or expired token."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        logger.info("Rejected expired token")
        return None
    except InvalidTokenError:
        logger.warning("Rejected invalid token")
        return None
