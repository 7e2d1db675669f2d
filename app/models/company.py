from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import relationship
from app.database import Base


class Company(Base):
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=False)
    logo_url = Column(Text, nullable=True)

    # Rows are removed by the ON DELETE CASCADE on jobs.company_handle
    jobs = relationship(
        "Job",
        back_populates="company",
        order_by="Job.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Company {self.handle}>"
