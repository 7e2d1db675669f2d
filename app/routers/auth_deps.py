"""
Authentication and authorization dependencies.

`authenticate_jwt` runs for every API request and never fails on its own: a
missing or bad token just leaves the request anonymous. The `ensure_*`
dependencies then decide per endpoint.
"""
import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.schemas.auth import TokenData
from app.services import auth as auth_service

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def authenticate_jwt(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[TokenData]:
    """
    Decodes the bearer token, if any, and stores the claims on request.state.user.
    """
    request.state.user = None
    if credentials is None:
        return None

    payload = auth_service.decode_token(credentials.credentials)
    if payload is None or not payload.get("username"):
        return None

    user = TokenData.model_validate(payload)
    request.state.user = user
    return user


def ensure_logged_in(user: Optional[TokenData] = Depends(authenticate_jwt)) -> TokenData:
    if user is None:
        raise UnauthorizedError()
    return user


def ensure_admin(user: TokenData = Depends(ensure_logged_in)) -> TokenData:
    if not user.is_admin:
        logger.warning(f"Admin access denied for {user.username}")
        raise ForbiddenError()
    return user


def ensure_correct_user_or_admin(
    username: str,
    user: TokenData = Depends(ensure_logged_in),
) -> TokenData:
    """
    Admins may act on any account; everyone else only on the {username} in the path.
    """
    if not (user.is_admin or user.username == username):
        logger.warning(f"{user.username} denied access to {username}")
        raise ForbiddenError("You may only access your own account.")
    return user
