"""
Product schema models
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime

from app.schemas.common import AuthorInfo, DateWindow


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str


class ProductListItem(BaseModel):
    """Product row in leaderboards and listings"""
    id: int
    name: str
    tagline: str
    description: str
    upvotes: int
    views: int
    reviews: int
    createdAt: datetime


class ProductDetail(ProductListItem):
    howItWorks: str
    icon: str
    url: str
    categoryId: Optional[int] = None
    owner: AuthorInfo


class LeaderboardResponse(BaseModel):
    products: List[ProductListItem]
    page: int
    totalPages: int
    window: DateWindow


class ProductUpvoteResponse(BaseModel):
    productId: int
    upvoted: bool
    upvotes: int


class ReviewCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    review: str = Field(..., min_length=1, max_length=1000, description="Review text")


class ReviewResponse(BaseModel):
    id: int
    rating: int
    review: str
    createdAt: datetime
    author: AuthorInfo
