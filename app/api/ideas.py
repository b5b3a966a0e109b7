"""
Idea marketplace API
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.core.config import settings
from app.db.database import get_db
from app.schemas.common import ResponseModel
from app.schemas.idea import IdeaResponse
from app.services.idea_service import IdeaService, IdeaRow
from app.utils.auth import get_current_profile_id

router = APIRouter(prefix="/api/ideas", tags=["ideas"])


def idea_response(row: IdeaRow) -> IdeaResponse:
    idea, likes = row
    return IdeaResponse(
        id=idea.gpt_idea_id,
        idea=idea.idea,
        views=idea.views,
        likes=likes or 0,
        isClaimed=idea.claimed_by is not None,
        claimedAt=idea.claimed_at,
        createdAt=idea.created_at,
    )


@router.get("", response_model=ResponseModel)
async def list_ideas(
    limit: int = Query(settings.DEFAULT_LIST_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    rows = await IdeaService.get_ideas(db, limit)
    return ResponseModel(data=[idea_response(row) for row in rows])


@router.get("/{idea_id}", response_model=ResponseModel)
async def get_idea(idea_id: str, db: AsyncSession = Depends(get_db)):
    row = await IdeaService.get_idea(db, idea_id)
    return ResponseModel(data=idea_response(row))


@router.post("/{idea_id}/claim", response_model=ResponseModel)
async def claim_idea(
    idea_id: str,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    """
    Claim an idea for the current user
    """
    await IdeaService.claim_idea(db, idea_id, current_profile_id)
    row = await IdeaService.get_idea(db, idea_id, record_view=False)
    return ResponseModel(message="Idea claimed", data=idea_response(row))
