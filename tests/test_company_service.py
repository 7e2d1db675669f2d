import pytest

from app.core.exceptions import BadRequestError, NotFoundError
from app.models.company import Company
from app.services.company_service import CompanyService


def test_create_company(db_session, seed):
    company = CompanyService.create(
        db_session, handle="new", name="New", description="New Description",
        num_employees=1, logo_url="http://new.img",
    )
    assert company.handle == "new"
    saved = db_session.get(Company, "new")
    assert saved.name == "New"
    assert saved.num_employees == 1


def test_create_company_duplicate_handle(db_session, seed):
    with pytest.raises(BadRequestError):
        CompanyService.create(db_session, handle="c1", name="Other", description="d")


def test_create_company_duplicate_name(db_session, seed):
    with pytest.raises(BadRequestError):
        CompanyService.create(db_session, handle="other", name="C1", description="d")
    # session is usable after the rollback
    assert db_session.get(Company, "c2") is not None


def test_find_all_no_filter(db_session, seed):
    assert [c.handle for c in CompanyService.find_all(db_session)] == ["c1", "c2", "c3"]


def test_find_all_filters(db_session, seed):
    assert [c.handle for c in CompanyService.find_all(db_session, min_employees=2)] == ["c2", "c3"]
    assert [c.handle for c in CompanyService.find_all(db_session, max_employees=2)] == ["c1", "c2"]
    assert [c.handle for c in CompanyService.find_all(db_session, name_like="2")] == ["c2"]
    assert CompanyService.find_all(db_session, name_like="zzz") == []


def test_find_all_min_over_max(db_session, seed):
    with pytest.raises(BadRequestError):
        CompanyService.find_all(db_session, min_employees=5, max_employees=1)


def test_get_company(db_session, seed):
    company = CompanyService.get(db_session, "c1")
    assert [job.title for job in company.jobs] == ["J1", "J2", "J3"]


def test_get_company_not_found(db_session, seed):
    with pytest.raises(NotFoundError):
        CompanyService.get(db_session, "nope")


def test_update_company(db_session, seed):
    company = CompanyService.update(
        db_session, "c1", {"name": "New", "description": "New Description", "numEmployees": 10},
    )
    assert company.name == "New"
    assert company.description == "New Description"
    assert company.num_employees == 10
    assert company.logo_url == "http://c1.img"


def test_update_company_null_fields(db_session, seed):
    company = CompanyService.update(db_session, "c1", {"numEmployees": None, "logoUrl": None})
    assert company.num_employees is None
    assert company.logo_url is None


def test_update_company_not_found(db_session, seed):
    with pytest.raises(NotFoundError):
        CompanyService.update(db_session, "nope", {"name": "x"})


def test_update_company_no_data(db_session, seed):
    with pytest.raises(BadRequestError):
        CompanyService.update(db_session, "c1", {})


def test_remove_company(db_session, seed):
    CompanyService.remove(db_session, "c1")
    assert db_session.get(Company, "c1") is None


def test_remove_company_not_found(db_session, seed):
    with pytest.raises(NotFoundError):
        CompanyService.remove(db_session, "nope")
