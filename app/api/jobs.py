"""
Job board API
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID

from app.core.config import settings
from app.db.database import get_db
from app.models.job import Job
from app.schemas.common import ResponseModel
from app.schemas.job import JobCreate, JobListItem, JobDetail, JobType, LocationType, SalaryRange
from app.services.job_service import JobService
from app.utils.auth import get_current_profile_id

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


def job_list_item(job: Job) -> JobListItem:
    return JobListItem(
        id=job.job_id,
        position=job.position,
        overview=job.overview,
        companyName=job.company_name,
        companyLogo=job.company_logo,
        companyLocation=job.company_location,
        jobType=job.job_type,
        location=job.location,
        salaryRange=job.salary_range,
        createdAt=job.created_at,
    )


@router.get("", response_model=ResponseModel)
async def list_jobs(
    location: Optional[LocationType] = Query(None),
    job_type: Optional[JobType] = Query(None, alias="type"),
    salary: Optional[SalaryRange] = Query(None),
    limit: int = Query(settings.DEFAULT_LIST_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """
    Newest jobs, filterable by location, type and salary range
    """
    jobs = await JobService.get_jobs(db, limit=limit, location=location, job_type=job_type, salary=salary)
    return ResponseModel(data=[job_list_item(j) for j in jobs])


@router.get("/{job_id}", response_model=ResponseModel)
async def get_job(job_id: str, db: AsyncSession = Depends(get_db)):
    job = await JobService.get_job_by_id(db, job_id)
    item = job_list_item(job)
    return ResponseModel(
        data=JobDetail(
            **item.model_dump(),
            responsibilities=job.responsibilities,
            qualifications=job.qualifications,
            benefits=job.benefits,
            skills=job.skills,
            applyUrl=job.apply_url,
        )
    )


@router.post("", response_model=ResponseModel)
async def create_job(
    job_data: JobCreate,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    job = await JobService.create_job(db, job_data)
    return ResponseModel(message="Job posted", data={"id": job.job_id})
