from sqlalchemy import Column, Integer, String, Enum, ForeignKey
from sqlalchemy.orm import relationship
import enum
from app.database import Base


class ApplicationState(str, enum.Enum):
    """Progress of a user's application to a job."""
    INTERESTED = "interested"
    APPLIED = "applied"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Application(Base):
    __tablename__ = "applications"

    username = Column(
        String(25),
        ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    )
    job_id = Column(
        Integer,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        primary_key=True,
    )
    state = Column(
        Enum(ApplicationState, values_callable=lambda e: [m.value for m in e], native_enum=False),
        default=ApplicationState.APPLIED,
        nullable=False,
    )

    user = relationship("User", back_populates="applications")
    job = relationship("Job", back_populates="applications")
