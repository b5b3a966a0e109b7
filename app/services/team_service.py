"""
Team data access
"""
import logging
from typing import List, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import NotFoundError
from app.models.team import Team
from app.schemas.team import TeamCreate
from app.utils.identifiers import parse_numeric_id

logger = logging.getLogger(__name__)


class TeamService:

    @staticmethod
    async def get_teams(db: AsyncSession, limit: int) -> List[Team]:
        result = await db.execute(
            select(Team)
            .options(selectinload(Team.team_leader))
            .order_by(Team.created_at.desc(), Team.team_id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_team_by_id(db: AsyncSession, team_id: Union[str, int]) -> Team:
        team_id = parse_numeric_id(team_id, "team_id")
        result = await db.execute(
            select(Team)
            .where(Team.team_id == team_id)
            .options(selectinload(Team.team_leader))
        )
        team = result.scalar_one_or_none()
        if team is None:
            raise NotFoundError(f"Team {team_id} not found")
        return team

    @classmethod
    async def create_team(cls, db: AsyncSession, profile_id: UUID, data: TeamCreate) -> Team:
        team = Team(
            team_leader_id=profile_id,
            team_size=data.size,
            product_name=data.name,
            product_stage=data.stage,
            product_description=data.description,
            roles=data.roles,
            equity_split=data.equity,
        )
        db.add(team)
        await db.commit()
        logger.info("Profile %s created team %s", profile_id, team.team_id)
        return await cls.get_team_by_id(db, team.team_id)
