"""
Community post and upvote models
"""
from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from app.db.database import Base, IdType


class Post(Base):
    __tablename__ = "posts"

    post_id = Column(IdType, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    topic_id = Column(IdType, ForeignKey("topics.topic_id", ondelete="CASCADE"), nullable=False)
    profile_id = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    topic = relationship("Topic", back_populates="posts")
    author = relationship("Profile", back_populates="posts")
    # Only top-level replies carry post_id; second-level ones go through PostReply.children
    replies = relationship("PostReply", back_populates="post", cascade="all")
    upvotes = relationship("PostUpvote", cascade="all")


class PostUpvote(Base):
    __tablename__ = "post_upvotes"

    post_id = Column(IdType, ForeignKey("posts.post_id", ondelete="CASCADE"), primary_key=True)
    profile_id = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), primary_key=True)
