"""
Team schema models
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal, Optional
from datetime import datetime

ProductStage = Literal["idea", "prototype", "mvp", "product"]


class TeamCreate(BaseModel):
    """Submit team request"""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=20, description="Product name")
    stage: ProductStage
    size: int = Field(..., ge=1, le=100, description="Team size")
    equity: int = Field(..., ge=1, le=100, description="Equity offered, percent")
    roles: str = Field(..., min_length=1, description="Comma separated roles")
    description: str = Field(..., min_length=1, max_length=200)


class TeamLeader(BaseModel):
    name: str
    username: str
    avatar: Optional[str] = None
    role: str


class TeamListItem(BaseModel):
    id: int
    productName: str
    roles: str
    productDescription: str
    leader: TeamLeader


class TeamDetail(TeamListItem):
    productStage: str
    teamSize: int
    equitySplit: int
    createdAt: datetime
