"""
Idea marketplace data access
"""
import logging
from datetime import datetime, timezone
from typing import List, Tuple, Union
from uuid import UUID

from sqlalchemy import select, func, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.idea import GptIdea, GptIdeaLike
from app.utils.identifiers import parse_numeric_id

logger = logging.getLogger(__name__)

# (idea, like count)
IdeaRow = Tuple[GptIdea, int]


def _ideas_query():
    likes = (
        select(func.count())
        .select_from(GptIdeaLike)
        .where(GptIdeaLike.gpt_idea_id == GptIdea.gpt_idea_id)
        .scalar_subquery()
        .label("likes")
    )
    return select(GptIdea, likes)


class IdeaService:

    @staticmethod
    async def get_ideas(db: AsyncSession, limit: int) -> List[IdeaRow]:
        result = await db.execute(
            _ideas_query()
            .order_by(GptIdea.created_at.desc(), GptIdea.gpt_idea_id.desc())
            .limit(limit)
        )
        return [tuple(row) for row in result.all()]

    @staticmethod
    async def get_idea(db: AsyncSession, idea_id: Union[str, int], record_view: bool = True) -> IdeaRow:
        idea_id = parse_numeric_id(idea_id, "idea_id")
        if record_view:
            await db.execute(
                update(GptIdea)
                .where(GptIdea.gpt_idea_id == idea_id)
                .values(views=GptIdea.views + 1)
            )
            await db.commit()

        result = await db.execute(_ideas_query().where(GptIdea.gpt_idea_id == idea_id))
        row = result.one_or_none()
        if row is None:
            raise NotFoundError(f"Idea {idea_id} not found")
        return tuple(row)

    @staticmethod
    async def claim_idea(db: AsyncSession, idea_id: Union[str, int], profile_id: UUID) -> None:
        """
        Mark an unclaimed idea as claimed by the profile
        """
        idea_id = parse_numeric_id(idea_id, "idea_id")
        result = await db.execute(
            update(GptIdea)
            .where(GptIdea.gpt_idea_id == idea_id, GptIdea.claimed_by.is_(None))
            .values(claimed_by=profile_id, claimed_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            exists = await db.execute(select(GptIdea.gpt_idea_id).where(GptIdea.gpt_idea_id == idea_id))
            if exists.scalar_one_or_none() is None:
                raise NotFoundError(f"Idea {idea_id} not found")
            raise ConflictError(f"Idea {idea_id} is already claimed")
        await db.commit()
        logger.info("Profile %s claimed idea %s", profile_id, idea_id)
