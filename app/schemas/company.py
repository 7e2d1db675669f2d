from typing import List, Optional
from pydantic import Field, model_validator

from app.core.schemas import RequestModel, ResponseModel, DecimalStr


class CompanyNew(RequestModel):
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdate(RequestModel):
    """Every field optional; the handle is immutable. Required columns may not be nulled."""
    name: str = Field(None, min_length=1)
    description: str = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanySearch(RequestModel):
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)
    name_like: Optional[str] = Field(None, min_length=1)

    @model_validator(mode="after")
    def check_employee_range(self):
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise ValueError("Min employees cannot be greater than max")
        return self


class CompanyResponse(ResponseModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(ResponseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: DecimalStr = None


class CompanyDetail(CompanyResponse):
    jobs: List[CompanyJob] = []


class CompanyEnvelope(ResponseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(ResponseModel):
    company: CompanyDetail


class CompanyListEnvelope(ResponseModel):
    companies: List[CompanyResponse]


class CompanyDeleted(ResponseModel):
    deleted: str
