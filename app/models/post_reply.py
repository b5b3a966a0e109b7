"""
Threaded post reply model
"""
from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from app.db.database import Base, IdType


class PostReply(Base):
    """
    A reply either to a post (top-level, parent_id is NULL) or to a top-level
    reply (second-level, post_id is NULL). Exactly one of the two is set.
    """
    __tablename__ = "post_replies"

    post_reply_id = Column(IdType, primary_key=True, autoincrement=True)
    post_id = Column(IdType, ForeignKey("posts.post_id", ondelete="CASCADE"), nullable=True)
    parent_id = Column(IdType, ForeignKey("post_replies.post_reply_id", ondelete="CASCADE"), nullable=True)
    profile_id = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), nullable=False)
    reply = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    post = relationship("Post", back_populates="replies")
    author = relationship("Profile", back_populates="replies")
    parent = relationship("PostReply", back_populates="children", remote_side=[post_reply_id])
    children = relationship(
        "PostReply",
        back_populates="parent",
        cascade="all",
        order_by=[created_at, post_reply_id],
    )
