"""
Product API: leaderboards, product detail, upvotes and reviews
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.core.config import settings
from app.core.exceptions import InvalidParamsError
from app.db.database import get_db
from app.models.product import Product, Review
from app.schemas.common import AuthorInfo, DateWindow, ResponseModel
from app.schemas.product import (
    CategoryResponse, ProductListItem, ProductDetail, LeaderboardResponse,
    ProductUpvoteResponse, ReviewCreate, ReviewResponse
)
from app.services import date_windows
from app.services.product_service import ProductService
from app.utils.auth import get_current_profile_id
from app.utils.identifiers import MAX_ID

router = APIRouter(prefix="/api/products", tags=["products"])


def product_list_item(product: Product) -> ProductListItem:
    return ProductListItem(
        id=product.product_id,
        name=product.name,
        tagline=product.tagline,
        description=product.description,
        upvotes=product.upvotes,
        views=product.views,
        reviews=product.reviews,
        createdAt=product.created_at,
    )


def review_response(review: Review) -> ReviewResponse:
    return ReviewResponse(
        id=review.review_id,
        rating=review.rating,
        review=review.review,
        createdAt=review.created_at,
        author=AuthorInfo(
            name=review.author.name,
            username=review.author.username,
            avatar=review.author.avatar,
        ),
    )


def parse_page(request: Request) -> int:
    """
    ?page= as a 1-based int, defaulting to 1. The row offset it implies
    must fit a BIGINT.
    """
    raw = request.query_params.get("page")
    if raw is None or raw == "":
        return 1
    try:
        page = int(raw)
    except ValueError:
        page = 0
    if page < 1 or (page - 1) * settings.PAGE_SIZE > MAX_ID:
        raise InvalidParamsError(
            "Invalid page",
            errors={"page": "must be a positive integer"},
            error_code="invalid_page",
        )
    return page


async def leaderboard(db: AsyncSession, window: date_windows.Window, page: int) -> ResponseModel:
    start, end = window
    products = await ProductService.get_products_by_date_range(db, start, end, page=page)
    total_pages = await ProductService.get_product_pages_by_date_range(db, start, end)
    return ResponseModel(
        data=LeaderboardResponse(
            products=[product_list_item(p) for p in products],
            page=page,
            totalPages=total_pages,
            window=DateWindow(start=start, end=end),
        )
    )


@router.get("/categories", response_model=ResponseModel)
async def list_categories(db: AsyncSession = Depends(get_db)):
    categories = await ProductService.get_categories(db)
    return ResponseModel(
        data=[
            CategoryResponse(id=c.category_id, name=c.name, description=c.description)
            for c in categories
        ]
    )


@router.get("/leaderboards/daily/{year}/{month}/{day}", response_model=ResponseModel)
async def daily_leaderboard(
    year: int, month: int, day: int,
    page: int = Depends(parse_page),
    db: AsyncSession = Depends(get_db)
):
    """
    Best products of one day
    """
    return await leaderboard(db, date_windows.daily_window(year, month, day), page)


@router.get("/leaderboards/weekly/{year}/{week}", response_model=ResponseModel)
async def weekly_leaderboard(
    year: int, week: int,
    page: int = Depends(parse_page),
    db: AsyncSession = Depends(get_db)
):
    """
    Best products of one ISO week
    """
    return await leaderboard(db, date_windows.weekly_window(year, week), page)


@router.get("/leaderboards/monthly/{year}/{month}", response_model=ResponseModel)
async def monthly_leaderboard(
    year: int, month: int,
    page: int = Depends(parse_page),
    db: AsyncSession = Depends(get_db)
):
    return await leaderboard(db, date_windows.monthly_window(year, month), page)


@router.get("/leaderboards/yearly/{year}", response_model=ResponseModel)
async def yearly_leaderboard(
    year: int,
    page: int = Depends(parse_page),
    db: AsyncSession = Depends(get_db)
):
    return await leaderboard(db, date_windows.yearly_window(year), page)


@router.get("/{product_id}", response_model=ResponseModel)
async def get_product(product_id: str, db: AsyncSession = Depends(get_db)):
    """
    Product detail; counts as a view
    """
    product = await ProductService.record_view(db, product_id)
    item = product_list_item(product)
    return ResponseModel(
        data=ProductDetail(
            **item.model_dump(),
            howItWorks=product.how_it_works,
            icon=product.icon,
            url=product.url,
            categoryId=product.category_id,
            owner=AuthorInfo(
                name=product.owner.name,
                username=product.owner.username,
                avatar=product.owner.avatar,
            ),
        )
    )


@router.post("/{product_id}/upvote", response_model=ResponseModel)
async def upvote_product(
    product_id: str,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    upvoted, upvotes = await ProductService.toggle_product_upvote(db, product_id, current_profile_id)
    return ResponseModel(data=ProductUpvoteResponse(productId=int(product_id), upvoted=upvoted, upvotes=upvotes))


@router.get("/{product_id}/reviews", response_model=ResponseModel)
async def list_reviews(product_id: str, db: AsyncSession = Depends(get_db)):
    reviews = await ProductService.get_reviews(db, product_id)
    return ResponseModel(data=[review_response(r) for r in reviews])


@router.post("/{product_id}/reviews", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
async def create_review(
    product_id: str,
    review_data: ReviewCreate,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    review = await ProductService.create_review(
        db, product_id, current_profile_id, review_data.rating, review_data.review
    )
    return ResponseModel(code=201, message="Review created", data=review_response(review))
