from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from app.core.schemas import RequestModel


class UserAuth(RequestModel):
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class UserRegister(RequestModel):
    """Self-service signup. Never grants admin rights."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class Token(BaseModel):
    token: str


class TokenData(BaseModel):
    username: Optional[str] = None
    is_admin: bool = Field(False, alias="isAdmin")
