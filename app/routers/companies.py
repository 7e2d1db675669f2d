from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.auth_deps import ensure_admin
from app.schemas.company import (
    CompanyNew,
    CompanyUpdate,
    CompanySearch,
    CompanyEnvelope,
    CompanyDetailEnvelope,
    CompanyListEnvelope,
    CompanyDeleted,
)
from app.services.company_service import CompanyService

router = APIRouter(
    prefix="/companies",
    tags=["companies"]
)


@router.post(
    "",
    response_model=CompanyEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_company(company_in: CompanyNew, db: Session = Depends(get_db)):
    """
    Create a company. Admin only.
    """
    company = CompanyService.create(db, **company_in.model_dump())
    return {"company": company}


@router.get("", response_model=CompanyListEnvelope)
def list_companies(
    filters: Annotated[CompanySearch, Query()],
    db: Session = Depends(get_db),
):
    """
    List companies, filtered by `minEmployees`, `maxEmployees` and `nameLike`.
    """
    companies = CompanyService.find_all(db, **filters.model_dump())
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """
    Company details including its jobs.
    """
    return {"company": CompanyService.get(db, handle)}


@router.patch(
    "/{handle}",
    response_model=CompanyEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def update_company(
    handle: str,
    company_in: CompanyUpdate,
    db: Session = Depends(get_db),
):
    """
    Update some of name, description, numEmployees and logoUrl. Admin only.
    """
    data = company_in.model_dump(exclude_unset=True, by_alias=True)
    company = CompanyService.update(db, handle, data)
    return {"company": company}


@router.delete(
    "/{handle}",
    response_model=CompanyDeleted,
    dependencies=[Depends(ensure_admin)],
)
def delete_company(handle: str, db: Session = Depends(get_db)):
    CompanyService.remove(db, handle)
    return {"deleted": handle}
