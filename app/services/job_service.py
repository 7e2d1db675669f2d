import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.core.sql import sql_for_partial_update, typed_bindparams
from app.models.company import Company
from app.models.job import Job

logger = logging.getLogger(__name__)


def _company_dict(company: Company) -> Dict[str, Any]:
    return {
        "handle": company.handle,
        "name": company.name,
        "description": company.description,
        "num_employees": company.num_employees,
        "logo_url": company.logo_url,
    }


class JobService:
    @staticmethod
    def create(
        db: Session,
        title: str,
        company_handle: str,
        salary: Optional[int] = None,
        equity: Optional[Decimal] = None,
    ) -> Job:
        """Create a job posting for an existing company."""
        if db.get(Company, company_handle) is None:
            raise NotFoundError(f"No company: {company_handle}")

        job = Job(
            title=title,
            salary=salary,
            equity=equity,
            company_handle=company_handle,
        )
        db.add(job)
        db.commit()
        db.refresh(job)

        logger.info(f"Created job {job.id} at {company_handle}")
        return job

    @staticmethod
    def find_all(
        db: Session,
        min_salary: Optional[int] = None,
        has_equity: bool = False,
        title: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Jobs ordered by title, each with its company's name.

        - min_salary: salary at least this much
        - has_equity: only jobs with non-zero equity
        - title: case-insensitive substring of the title
        """
        query = (
            db.query(Job, Company.name)
            .join(Company, Job.company_handle == Company.handle)
        )
        if min_salary is not None:
            query = query.filter(Job.salary >= min_salary)
        if has_equity:
            query = query.filter(Job.equity > 0)
        if title:
            query = query.filter(Job.title.ilike(f"%{title}%"))

        return [
            {
                "id": job.id,
                "title": job.title,
                "salary": job.salary,
                "equity": job.equity,
                "company_handle": job.company_handle,
                "company_name": company_name,
            }
            for job, company_name in query.order_by(Job.title, Job.id).all()
        ]

    @staticmethod
    def get(db: Session, job_id: int) -> Dict[str, Any]:
        """Job with its company embedded in place of the handle."""
        job = db.get(Job, job_id)
        if job is None:
            raise NotFoundError(f"No job: {job_id}")

        return {
            "id": job.id,
            "title": job.title,
            "salary": job.salary,
            "equity": job.equity,
            "company": _company_dict(job.company),
        }

    @staticmethod
    def update(db: Session, job_id: int, data: Dict[str, Any]) -> Job:
        set_cols, values = sql_for_partial_update(data)
        stmt = text(
            f"UPDATE jobs SET {set_cols} WHERE id = :lookup_id"
        ).bindparams(*typed_bindparams(Job.__table__, values))

        result = db.execute(stmt, {**values, "lookup_id": job_id})
        if result.rowcount == 0:
            db.rollback()
            raise NotFoundError(f"No job: {job_id}")
        db.commit()

        job = db.get(Job, job_id)
        return job

    @staticmethod
    def remove(db: Session, job_id: int) -> None:
        job = db.get(Job, job_id)
        if job is None:
            raise NotFoundError(f"No job: {job_id}")

        db.delete(job)
        db.commit()
        logger.info(f"Deleted job {job_id}")
