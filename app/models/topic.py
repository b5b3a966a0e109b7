"""
Community topic model
"""
from sqlalchemy import Column, String, Text, TIMESTAMP, func
from sqlalchemy.orm import relationship
from app.db.database import Base, IdType


class Topic(Base):
    __tablename__ = "topics"

    topic_id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    slug = Column(String(120), unique=True, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    posts = relationship("Post", back_populates="topic", cascade="all")
