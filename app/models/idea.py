"""
Idea marketplace models
"""
from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from app.db.database import Base, IdType


class GptIdea(Base):
    __tablename__ = "gpt_ideas"

    gpt_idea_id = Column(IdType, primary_key=True, autoincrement=True)
    idea = Column(Text, nullable=False)
    views = Column(Integer, nullable=False, default=0, server_default="0")
    claimed_at = Column(TIMESTAMP(timezone=True), nullable=True)
    claimed_by = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    likes = relationship("GptIdeaLike", cascade="all")


class GptIdeaLike(Base):
    __tablename__ = "gpt_ideas_likes"

    gpt_idea_id = Column(IdType, ForeignKey("gpt_ideas.gpt_idea_id", ondelete="CASCADE"), primary_key=True)
    profile_id = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), primary_key=True)
