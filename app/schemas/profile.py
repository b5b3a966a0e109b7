"""
Profile schema models
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal, Optional
from uuid import UUID

ProfileRole = Literal["developer", "designer", "marketer", "founder", "product-manager"]


class ProfileCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=80)
    username: str = Field(..., min_length=2, max_length=64, pattern=r"^[A-Za-z0-9_]+$")
    avatar: Optional[str] = None
    role: ProfileRole = "developer"
    headline: Optional[str] = Field(None, max_length=120)
    bio: Optional[str] = Field(None, max_length=1000)


class ProfileSummary(BaseModel):
    profileId: UUID
    name: str
    username: str
    avatar: Optional[str] = None


class ProfileResponse(ProfileSummary):
    role: str
    headline: Optional[str] = None
    bio: Optional[str] = None
