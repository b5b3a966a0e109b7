"""
Job board schema models
"""
from pydantic import BaseModel, Field, ConfigDict, HttpUrl
from typing import Literal
from datetime import datetime

JobType = Literal["full-time", "part-time", "freelance", "internship"]
LocationType = Literal["remote", "in-person", "hybrid"]
SalaryRange = Literal[
    "$0 - $50,000",
    "$50,000 - $70,000",
    "$70,000 - $100,000",
    "$100,000 - $120,000",
    "$120,000 - $150,000",
    "$150,000 - $250,000",
    "$250,000+",
]


class JobCreate(BaseModel):
    """Submit job request"""
    model_config = ConfigDict(str_strip_whitespace=True)

    position: str = Field(..., min_length=1, max_length=40)
    overview: str = Field(..., min_length=1, max_length=400)
    responsibilities: str = Field(..., min_length=1, max_length=400)
    qualifications: str = Field(..., min_length=1, max_length=400)
    benefits: str = Field(..., min_length=1, max_length=400)
    skills: str = Field(..., min_length=1, max_length=400)
    companyName: str = Field(..., min_length=1, max_length=40)
    companyLogoUrl: HttpUrl
    companyLocation: str = Field(..., min_length=1, max_length=40)
    applyUrl: HttpUrl
    jobType: JobType
    jobLocation: LocationType
    salaryRange: SalaryRange


class JobListItem(BaseModel):
    id: int
    position: str
    overview: str
    companyName: str
    companyLogo: str
    companyLocation: str
    jobType: str
    location: str
    salaryRange: str
    createdAt: datetime


class JobDetail(JobListItem):
    responsibilities: str
    qualifications: str
    benefits: str
    skills: str
    applyUrl: str
