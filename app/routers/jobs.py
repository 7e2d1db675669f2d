from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.auth_deps import ensure_admin
from app.schemas.job import (
    JobNew,
    JobUpdate,
    JobSearch,
    JobEnvelope,
    JobDetailEnvelope,
    JobListEnvelope,
    JobDeleted,
)
from app.services.job_service import JobService

router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"]
)


@router.post(
    "",
    response_model=JobEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_job(job_in: JobNew, db: Session = Depends(get_db)):
    """
    Create a job posting. Admin only.
    """
    job = JobService.create(db, **job_in.model_dump())
    return {"job": job}


@router.get("", response_model=JobListEnvelope)
def list_jobs(
    filters: Annotated[JobSearch, Query()],
    db: Session = Depends(get_db),
):
    """
    List jobs, filtered by `minSalary`, `hasEquity` and `title`.
    """
    return {"jobs": JobService.find_all(db, **filters.model_dump())}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Job details with the company it belongs to.
    """
    return {"job": JobService.get(db, job_id)}


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def update_job(job_id: int, job_in: JobUpdate, db: Session = Depends(get_db)):
    """
    Update some of title, salary and equity. Admin only.
    """
    data = job_in.model_dump(exclude_unset=True, by_alias=True)
    return {"job": JobService.update(db, job_id, data)}


@router.delete(
    "/{job_id}",
    response_model=JobDeleted,
    dependencies=[Depends(ensure_admin)],
)
def delete_job(job_id: int, db: Session = Depends(get_db)):
    JobService.remove(db, job_id)
    return {"deleted": job_id}
