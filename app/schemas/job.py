from decimal import Decimal
from typing import List, Optional
from pydantic import Field

from app.core.schemas import RequestModel, ResponseModel, DecimalStr
from app.schemas.company import CompanyResponse


class JobNew(RequestModel):
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(RequestModel):
    """id and companyHandle are fixed once a job exists."""
    title: str = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)


class JobSearch(RequestModel):
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: bool = False
    title: Optional[str] = Field(None, min_length=1)


class JobResponse(ResponseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: DecimalStr = None
    company_handle: str


class JobListItem(JobResponse):
    company_name: str


class JobDetail(ResponseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: DecimalStr = None
    company: CompanyResponse


class JobEnvelope(ResponseModel):
    job: JobResponse


class JobDetailEnvelope(ResponseModel):
    job: JobDetail


class JobListEnvelope(ResponseModel):
    jobs: List[JobListItem]


class JobDeleted(ResponseModel):
    deleted: int
