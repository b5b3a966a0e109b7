"""
User profile API
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.api.community import post_list_item
from app.api.products import product_list_item
from app.db.database import get_db
from app.models.profile import Profile
from app.schemas.common import ResponseModel
from app.schemas.profile import ProfileCreate, ProfileResponse
from app.services.community_service import CommunityService
from app.services.product_service import ProductService
from app.services.profile_service import ProfileService
from app.utils.auth import get_current_profile_id

router = APIRouter(prefix="/api/users", tags=["users"])


def profile_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse(
        profileId=profile.profile_id,
        name=profile.name,
        username=profile.username,
        avatar=profile.avatar,
        role=profile.role,
        headline=profile.headline,
        bio=profile.bio,
    )


@router.post("", response_model=ResponseModel)
async def create_profile(
    profile_data: ProfileCreate,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    """
    Register the profile of the logged-in identity
    """
    profile = await ProfileService.create_profile(db, current_profile_id, profile_data)
    return ResponseModel(message="Profile created", data=profile_response(profile))


@router.get("/me", response_model=ResponseModel)
async def get_me(
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    profile = await ProfileService.get_user_by_id(db, current_profile_id)
    return ResponseModel(data=profile_response(profile))


@router.get("/{username}", response_model=ResponseModel)
async def get_user_profile(username: str, db: AsyncSession = Depends(get_db)):
    profile = await ProfileService.get_user_profile(db, username)
    return ResponseModel(data=profile_response(profile))


@router.get("/{username}/products", response_model=ResponseModel)
async def get_user_products(username: str, db: AsyncSession = Depends(get_db)):
    profile = await ProfileService.get_user_profile(db, username)
    products = await ProductService.get_products_by_owner(db, profile.profile_id)
    return ResponseModel(data=[product_list_item(p) for p in products])


@router.get("/{username}/posts", response_model=ResponseModel)
async def get_user_posts(username: str, db: AsyncSession = Depends(get_db)):
    profile = await ProfileService.get_user_profile(db, username)
    rows = await CommunityService.get_posts_by_author(db, profile.profile_id)
    return ResponseModel(data=[post_list_item(row) for row in rows])
