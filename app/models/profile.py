"""
Profile model
"""
import uuid
from sqlalchemy import Column, String, Text, Enum, TIMESTAMP, Uuid, func
from sqlalchemy.orm import relationship
from app.db.database import Base

PROFILE_ROLES = ("developer", "designer", "marketer", "founder", "product-manager")


class Profile(Base):
    """Application user record, keyed by the identity provider's user id"""
    __tablename__ = "profiles"

    profile_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    username = Column(String(64), unique=True, nullable=False)
    avatar = Column(Text, nullable=True)
    role = Column(Enum(*PROFILE_ROLES, name="role"), nullable=False, default="developer")
    headline = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    posts = relationship("Post", back_populates="author", cascade="all")
    replies = relationship("PostReply", back_populates="author", cascade="all")
    products = relationship("Product", back_populates="owner", cascade="all")
