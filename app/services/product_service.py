"""
Product data access: leaderboards, upvotes, views and reviews
"""
import logging
from datetime import datetime
from typing import List, Tuple, Union
from uuid import UUID

from sqlalchemy import select, func, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.models.product import Category, Product, ProductUpvote, Review
from app.utils.identifiers import parse_numeric_id
from app.utils.pagination import calculate_total_pages, page_bounds

logger = logging.getLogger(__name__)


def _in_window(start: datetime, end: datetime):
    return (Product.created_at >= start, Product.created_at < end)


class ProductService:
    """Product queries and mutations"""

    @staticmethod
    async def get_categories(db: AsyncSession) -> List[Category]:
        result = await db.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    @staticmethod
    async def get_products_by_date_range(
        db: AsyncSession,
        start: datetime,
        end: datetime,
        page: int = 1,
        page_size: int = None,
    ) -> List[Product]:
        """
        One page of products created in [start, end), most upvoted first

        Args:
            start: inclusive lower bound
            end: exclusive upper bound
            page: 1-based page number
        """
        page_size = page_size or settings.PAGE_SIZE
        offset, limit = page_bounds(page, page_size)
        result = await db.execute(
            select(Product)
            .where(*_in_window(start, end))
            .order_by(Product.upvotes.desc(), Product.created_at.desc(), Product.product_id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_product_pages_by_date_range(
        db: AsyncSession,
        start: datetime,
        end: datetime,
        page_size: int = None,
    ) -> int:
        """
        Page count for get_products_by_date_range, never less than 1
        """
        result = await db.execute(
            select(func.count(Product.product_id)).where(*_in_window(start, end))
        )
        return calculate_total_pages(result.scalar_one(), page_size or settings.PAGE_SIZE)

    @staticmethod
    async def get_products_by_owner(db: AsyncSession, profile_id: UUID) -> List[Product]:
        result = await db.execute(
            select(Product)
            .where(Product.profile_id == profile_id)
            .order_by(Product.created_at.desc(), Product.product_id.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_product(db: AsyncSession, product_id: Union[str, int]) -> Product:
        product_id = parse_numeric_id(product_id, "product_id")
        result = await db.execute(
            select(Product)
            .where(Product.product_id == product_id)
            .options(selectinload(Product.owner))
        )
        product = result.scalar_one_or_none()
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    @staticmethod
    async def increment_counter(db: AsyncSession, product_id: int, column: str, amount: int = 1) -> int:
        """
        Atomically add `amount` to one of the product counters

        Returns the new value.
        """
        counter = getattr(Product, column)
        result = await db.execute(
            update(Product)
            .where(Product.product_id == product_id)
            .values({column: counter + amount})
            .returning(counter)
        )
        value = result.scalar_one_or_none()
        if value is None:
            raise NotFoundError(f"Product {product_id} not found")
        return value

    @classmethod
    async def record_view(cls, db: AsyncSession, product_id: Union[str, int]) -> Product:
        """
        Count a view and return the refreshed product
        """
        product = await cls.get_product(db, product_id)
        product.views = await cls.increment_counter(db, product.product_id, "views")
        await db.commit()
        return product

    @classmethod
    async def toggle_product_upvote(
        cls, db: AsyncSession, product_id: Union[str, int], profile_id: UUID
    ) -> Tuple[bool, int]:
        """
        Add or remove the profile's upvote and adjust the upvote counter

        Returns (upvoted, new upvote count).
        """
        product_id = parse_numeric_id(product_id, "product_id")
        existing = await db.execute(
            select(ProductUpvote).where(
                ProductUpvote.product_id == product_id,
                ProductUpvote.profile_id == profile_id,
            )
        )
        if existing.scalar_one_or_none():
            await db.execute(
                delete(ProductUpvote).where(
                    ProductUpvote.product_id == product_id,
                    ProductUpvote.profile_id == profile_id,
                )
            )
            count = await cls.increment_counter(db, product_id, "upvotes", -1)
            upvoted = False
        else:
            count = await cls.increment_counter(db, product_id, "upvotes", 1)
            db.add(ProductUpvote(product_id=product_id, profile_id=profile_id))
            upvoted = True
        await db.commit()
        logger.info("Profile %s %s product %s", profile_id, "upvoted" if upvoted else "un-upvoted", product_id)
        return upvoted, count

    @classmethod
    async def create_review(
        cls,
        db: AsyncSession,
        product_id: Union[str, int],
        profile_id: UUID,
        rating: int,
        review: str,
    ) -> Review:
        product_id = parse_numeric_id(product_id, "product_id")
        await cls.increment_counter(db, product_id, "reviews")
        new_review = Review(product_id=product_id, profile_id=profile_id, rating=rating, review=review)
        db.add(new_review)
        await db.commit()

        result = await db.execute(
            select(Review)
            .where(Review.review_id == new_review.review_id)
            .options(selectinload(Review.author))
        )
        logger.info("Profile %s reviewed product %s", profile_id, product_id)
        return result.scalar_one()

    @staticmethod
    async def get_reviews(db: AsyncSession, product_id: Union[str, int]) -> List[Review]:
        product_id = parse_numeric_id(product_id, "product_id")
        result = await db.execute(
            select(Review)
            .where(Review.product_id == product_id)
            .options(selectinload(Review.author))
            .order_by(Review.created_at.desc(), Review.review_id.desc())
        )
        return list(result.scalars().all())
