from typing import List
from pydantic import EmailStr, Field

from app.core.schemas import RequestModel, ResponseModel
from app.models.application import ApplicationState


class UserNew(RequestModel):
    """Admin-created account; may grant admin rights."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    is_admin: bool = False


class UserUpdate(RequestModel):
    first_name: str = Field(None, min_length=1, max_length=30)
    last_name: str = Field(None, min_length=1, max_length=30)
    password: str = Field(None, min_length=5, max_length=20)
    email: EmailStr = None
    is_admin: bool = None


class ApplicationRequest(RequestModel):
    state: ApplicationState = ApplicationState.APPLIED


class UserResponse(ResponseModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserJob(ResponseModel):
    id: int
    title: str
    company_handle: str
    company_name: str
    state: ApplicationState


class UserDetail(UserResponse):
    jobs: List[UserJob] = []


class UserEnvelope(ResponseModel):
    user: UserResponse


class UserDetailEnvelope(ResponseModel):
    user: UserDetail


class UserListEnvelope(ResponseModel):
    users: List[UserResponse]


class UserWithToken(ResponseModel):
    user: UserResponse
    token: str


class UserDeleted(ResponseModel):
    deleted: str


class ApplicationResult(ResponseModel):
    applied: int
