import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, NotFoundError
from app.core.sql import sql_for_partial_update, typed_bindparams
from app.models.company import Company

logger = logging.getLogger(__name__)

# API field name -> column name, where they differ
COMPANY_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyService:
    @staticmethod
    def create(
        db: Session,
        handle: str,
        name: str,
        description: str,
        num_employees: Optional[int] = None,
        logo_url: Optional[str] = None,
    ) -> Company:
        """
        Create a company. Raises BadRequestError if the handle or name is taken.
        """
        if db.get(Company, handle) is not None:
            raise BadRequestError(f"Duplicate company: {handle}")

        company = Company(
            handle=handle,
            name=name,
            description=description,
            num_employees=num_employees,
            logo_url=logo_url,
        )
        db.add(company)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise BadRequestError(f"Duplicate company name: {name}")
        db.refresh(company)

        logger.info(f"Created company {handle}")
        return company

    @staticmethod
    def find_all(
        db: Session,
        min_employees: Optional[int] = None,
        max_employees: Optional[int] = None,
        name_like: Optional[str] = None,
    ) -> List[Company]:
        """
        All companies ordered by name, optionally filtered by head count range
        and a case-insensitive name fragment.
        """
        if min_employees is not None and max_employees is not None and min_employees > max_employees:
            raise BadRequestError("Min employees cannot be greater than max")

        query = db.query(Company)
        if min_employees is not None:
            query = query.filter(Company.num_employees >= min_employees)
        if max_employees is not None:
            query = query.filter(Company.num_employees <= max_employees)
        if name_like:
            query = query.filter(Company.name.ilike(f"%{name_like}%"))

        return query.order_by(Company.name).all()

    @staticmethod
    def get(db: Session, handle: str) -> Company:
        """Company with its jobs loaded; NotFoundError if missing."""
        company = db.get(Company, handle)
        if company is None:
            raise NotFoundError(f"No company: {handle}")
        return company

    @staticmethod
    def update(db: Session, handle: str, data: Dict[str, Any]) -> Company:
        """
        Partial update keyed by API field names (``numEmployees``...).
        Only the fields present in ``data`` change.
        """
        set_cols, values = sql_for_partial_update(data, COMPANY_COLUMNS)
        stmt = text(
            f"UPDATE companies SET {set_cols} WHERE handle = :lookup_handle"
        ).bindparams(*typed_bindparams(Company.__table__, values))

        try:
            result = db.execute(stmt, {**values, "lookup_handle": handle})
            if result.rowcount == 0:
                raise NotFoundError(f"No company: {handle}")
            db.commit()
        except IntegrityError:
            db.rollback()
            raise BadRequestError(f"Duplicate company name: {data.get('name')}")
        except NotFoundError:
            db.rollback()
            raise

        return CompanyService.get(db, handle)

    @staticmethod
    def remove(db: Session, handle: str) -> None:
        """Delete a company and, through the foreign key, its jobs."""
        company = db.get(Company, handle)
        if company is None:
            raise NotFoundError(f"No company: {handle}")

        db.delete(company)
        db.commit()
        logger.info(f"Deleted company {handle}")
