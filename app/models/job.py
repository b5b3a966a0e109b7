"""
Job posting model
"""
from sqlalchemy import Column, Text, Enum, TIMESTAMP, func
from app.db.database import Base, IdType

JOB_TYPES = ("full-time", "part-time", "freelance", "internship")
LOCATION_TYPES = ("remote", "in-person", "hybrid")
SALARY_RANGES = (
    "$0 - $50,000",
    "$50,000 - $70,000",
    "$70,000 - $100,000",
    "$100,000 - $120,000",
    "$120,000 - $150,000",
    "$150,000 - $250,000",
    "$250,000+",
)


class Job(Base):
    __tablename__ = "jobs"

    job_id = Column(IdType, primary_key=True, autoincrement=True)
    position = Column(Text, nullable=False)
    overview = Column(Text, nullable=False)
    responsibilities = Column(Text, nullable=False)
    qualifications = Column(Text, nullable=False)
    benefits = Column(Text, nullable=False)
    skills = Column(Text, nullable=False)  # comma separated
    company_name = Column(Text, nullable=False)
    company_logo = Column(Text, nullable=False)
    company_location = Column(Text, nullable=False)
    apply_url = Column(Text, nullable=False)
    job_type = Column(Enum(*JOB_TYPES, name="job_type"), nullable=False)
    location = Column(Enum(*LOCATION_TYPES, name="location_type"), nullable=False)
    salary_range = Column(Enum(*SALARY_RANGES, name="salary_range"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
