from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings

# Support both PostgreSQL and SQLite via centralized settings
DATABASE_URL = settings.database_uri()


def make_engine(url: str, **kwargs) -> Engine:
    if url.startswith("sqlite"):
        # SQLite configuration for local development/testing
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = make_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Session Provider: Provides a database session per request.
    Transaction management is handled explicitly in the Service Layer.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = engine):
    """
    Registers all domain models and initializes the database schema.
    This should be called during the application startup lifespan.
    """
    # Import all models to ensure they are registered with Base.metadata before create_all
    from app.models import company, job, user, application  # noqa: F401
    # Perform schema emission
    Base.metadata.create_all(bind=bind)
