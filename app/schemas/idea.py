"""
Idea marketplace schema models
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class IdeaResponse(BaseModel):
    id: int
    idea: str
    views: int
    likes: int
    isClaimed: bool
    claimedAt: Optional[datetime] = None
    createdAt: datetime
