import pytest
import os
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["TEST_DATABASE_URL"] = "sqlite:///:memory:"
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("ADMIN_PASSWORD", None)

from app.database import Base, get_db
from app.main import app
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Fresh schema for each test; services commit freely inside it."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def seed(db_session):
    """
    Three companies, three jobs at c1, and two users (u1 regular, admin).
    Returns the job ids in creation order.
    """
    from app.models.company import Company
    from app.models.job import Job
    from app.models.user import User
    from app.services import auth as auth_service

    db_session.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
    ])
    db_session.flush()

    jobs = [
        Job(title="J1", salary=1, equity=Decimal("0.1"), company_handle="c1"),
        Job(title="J2", salary=2, equity=Decimal("0.2"), company_handle="c1"),
        Job(title="J3", salary=3, equity=None, company_handle="c1"),
    ]
    db_session.add_all(jobs)

    db_session.add_all([
        User(
            username="u1",
            password=auth_service.get_password_hash("password1"),
            first_name="U1F",
            last_name="U1L",
            email="user1@user.com",
            is_admin=False,
        ),
        User(
            username="admin",
            password=auth_service.get_password_hash("password2"),
            first_name="AdF",
            last_name="AdL",
            email="admin@user.com",
            is_admin=True,
        ),
    ])
    db_session.commit()
    return [job.id for job in jobs]


@pytest.fixture(scope="function")
def get_token():
    """Helper fixture to sign tokens without a login round trip."""
    from types import SimpleNamespace
    from app.services.auth import create_token

    def _get_token(username, is_admin=False):
        return create_token(SimpleNamespace(username=username, is_admin=is_admin))
    return _get_token


@pytest.fixture(scope="function")
def u1_headers(get_token):
    return {"Authorization": f"Bearer {get_token('u1')}"}


@pytest.fixture(scope="function")
def admin_headers(get_token):
    return {"Authorization": f"Bearer {get_token('admin', is_admin=True)}"}


@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
