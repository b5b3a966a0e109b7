"""
Profile data access
"""
import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, InvalidIdentifierError, NotFoundError
from app.models.profile import Profile
from app.schemas.profile import ProfileCreate

logger = logging.getLogger(__name__)


class ProfileService:

    @staticmethod
    async def get_user_profile(db: AsyncSession, username: str) -> Profile:
        result = await db.execute(select(Profile).where(Profile.username == username))
        profile = result.scalar_one_or_none()
        if profile is None:
            raise NotFoundError(f"User {username!r} not found")
        return profile

    @staticmethod
    async def get_user_by_id(db: AsyncSession, profile_id: Union[str, UUID]) -> Profile:
        if not isinstance(profile_id, UUID):
            try:
                profile_id = UUID(str(profile_id))
            except ValueError:
                raise InvalidIdentifierError("profile_id", profile_id)
        profile = await db.get(Profile, profile_id)
        if profile is None:
            raise NotFoundError(f"Profile {profile_id} not found")
        return profile

    @staticmethod
    async def create_profile(db: AsyncSession, profile_id: UUID, data: ProfileCreate) -> Profile:
        """
        Create the application profile for an authenticated identity
        """
        if await db.get(Profile, profile_id) is not None:
            raise ConflictError("Profile already exists")
        taken = await db.execute(select(Profile.profile_id).where(Profile.username == data.username))
        if taken.scalar_one_or_none() is not None:
            raise ConflictError("Username is taken", errors={"username": "already taken"})

        profile = Profile(
            profile_id=profile_id,
            name=data.name,
            username=data.username,
            avatar=data.avatar,
            role=data.role,
            headline=data.headline,
            bio=data.bio,
        )
        db.add(profile)
        await db.commit()
        await db.refresh(profile)
        logger.info("Created profile %s (%s)", profile_id, data.username)
        return profile
