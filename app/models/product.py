"""
Product, category, upvote and review models
"""
from sqlalchemy import (
    Column, Integer, Text, TIMESTAMP, ForeignKey, CheckConstraint, Uuid, func
)
from sqlalchemy.orm import relationship
from app.db.database import Base, IdType


class Category(Base):
    __tablename__ = "categories"

    category_id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class Product(Base):
    __tablename__ = "products"

    product_id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    tagline = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    how_it_works = Column(Text, nullable=False)
    icon = Column(Text, nullable=False)
    url = Column(Text, nullable=False)
    # Counters, only ever changed through UPDATE ... SET col = col + n
    upvotes = Column(Integer, nullable=False, default=0, server_default="0")
    views = Column(Integer, nullable=False, default=0, server_default="0")
    reviews = Column(Integer, nullable=False, default=0, server_default="0")
    profile_id = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), nullable=False)
    category_id = Column(IdType, ForeignKey("categories.category_id", ondelete="SET NULL"), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    owner = relationship("Profile", back_populates="products")
    category = relationship("Category")
    product_upvotes = relationship("ProductUpvote", cascade="all")
    product_reviews = relationship("Review", back_populates="product", cascade="all")


class ProductUpvote(Base):
    __tablename__ = "product_upvotes"

    product_id = Column(IdType, ForeignKey("products.product_id", ondelete="CASCADE"), primary_key=True)
    profile_id = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), primary_key=True)


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="rating_check"),
    )

    review_id = Column(IdType, primary_key=True, autoincrement=True)
    product_id = Column(IdType, ForeignKey("products.product_id", ondelete="CASCADE"), nullable=False)
    profile_id = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), nullable=False)
    rating = Column(Integer, nullable=False)
    review = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    product = relationship("Product", back_populates="product_reviews")
    author = relationship("Profile")
