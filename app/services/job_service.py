"""
Job board data access
"""
import logging
from typing import List, Optional, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.job import Job
from app.schemas.job import JobCreate
from app.utils.identifiers import parse_numeric_id

logger = logging.getLogger(__name__)


class JobService:

    @staticmethod
    async def get_jobs(
        db: AsyncSession,
        limit: int,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        salary: Optional[str] = None,
    ) -> List[Job]:
        """
        Newest jobs, optionally filtered by location, type and salary range
        """
        stmt = select(Job)
        if location:
            stmt = stmt.where(Job.location == location)
        if job_type:
            stmt = stmt.where(Job.job_type == job_type)
        if salary:
            stmt = stmt.where(Job.salary_range == salary)

        result = await db.execute(stmt.order_by(Job.created_at.desc(), Job.job_id.desc()).limit(limit))
        return list(result.scalars().all())

    @staticmethod
    async def get_job_by_id(db: AsyncSession, job_id: Union[str, int]) -> Job:
        job_id = parse_numeric_id(job_id, "job_id")
        result = await db.execute(select(Job).where(Job.job_id == job_id))
        job = result.scalar_one_or_none()
        if job is None:
            raise NotFoundError(f"Job {job_id} not found")
        return job

    @staticmethod
    async def create_job(db: AsyncSession, data: JobCreate) -> Job:
        job = Job(
            position=data.position,
            overview=data.overview,
            responsibilities=data.responsibilities,
            qualifications=data.qualifications,
            benefits=data.benefits,
            skills=data.skills,
            company_name=data.companyName,
            company_logo=str(data.companyLogoUrl),
            company_location=data.companyLocation,
            apply_url=str(data.applyUrl),
            job_type=data.jobType,
            location=data.jobLocation,
            salary_range=data.salaryRange,
        )
        db.add(job)
        await db.commit()
        await db.refresh(job)
        logger.info("Created job %s (%s)", job.job_id, job.position)
        return job
