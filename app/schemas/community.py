"""
Community schema models: topics, posts, threaded replies
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Literal
from datetime import datetime

from app.schemas.common import AuthorInfo
from app.utils.identifiers import MAX_ID

Sorting = Literal["newest", "popular"]
Period = Literal["all-time", "today", "week", "month", "year"]


class TopicCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Topic name")
    slug: str = Field(..., min_length=1, max_length=120, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$", description="URL slug")


class TopicResponse(BaseModel):
    name: str
    slug: str

    model_config = ConfigDict(from_attributes=True)


class PostCreate(BaseModel):
    """Create post request"""
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=40, description="Post title")
    category: str = Field(..., min_length=1, max_length=120, description="Topic slug")
    content: str = Field(..., min_length=1, max_length=1000, description="Post body")


class PostListItem(BaseModel):
    """Post in the community feed"""
    id: int
    title: str
    content: str
    topic: str
    topicSlug: str
    author: AuthorInfo
    upvotes: int = 0
    replies: int = 0
    createdAt: datetime


class PostDetail(PostListItem):
    updatedAt: datetime


class PostUpvoteResponse(BaseModel):
    postId: int
    upvoted: bool
    upvotes: int


class ReplyCreate(BaseModel):
    """Create reply request; topLevelId makes it a second-level reply"""
    model_config = ConfigDict(str_strip_whitespace=True)

    reply: str = Field(..., min_length=1, max_length=1000, description="Reply text")
    topLevelId: Optional[int] = Field(None, ge=1, le=MAX_ID, description="Top-level reply being answered")


class Reply(BaseModel):
    """Second-level reply, carries no children of its own"""
    id: int
    text: str
    createdAt: datetime
    author: AuthorInfo


class TopLevelReply(Reply):
    """Reply attached directly to a post"""
    replies: List[Reply] = []


class ReplyCreated(BaseModel):
    id: int
    postId: Optional[int] = None
    parentId: Optional[int] = None
    level: Literal["top", "second"]
    createdAt: datetime
