"""
Shared schema models
"""
from pydantic import BaseModel
from typing import TypeVar, Optional
from datetime import datetime

T = TypeVar('T')


class ResponseModel(BaseModel):
    """Standard response envelope"""
    code: int = 200
    message: Optional[str] = None
    data: Optional[T] = None


class AuthorInfo(BaseModel):
    """Author shown next to posts, replies and reviews"""
    name: str
    username: str
    avatar: Optional[str] = None


class DateWindow(BaseModel):
    """Half-open [start, end) window"""
    start: datetime
    end: datetime
