"""
User Model.
A user is identified by username; admins manage companies, jobs and other users.
"""
from sqlalchemy import Column, String, Text, Boolean, CheckConstraint
from sqlalchemy.orm import relationship
from app.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("email LIKE '%@%'", name="ck_users_email"),
    )

    username = Column(String(25), primary_key=True)
    password = Column(Text, nullable=False)  # bcrypt hash, never serialized
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)

    applications = relationship(
        "Application",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<User {self.username}{' (admin)' if self.is_admin else ''}>"
