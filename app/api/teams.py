"""
Team API
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.core.config import settings
from app.db.database import get_db
from app.models.team import Team
from app.schemas.common import ResponseModel
from app.schemas.team import TeamCreate, TeamLeader, TeamListItem, TeamDetail
from app.services.team_service import TeamService
from app.utils.auth import get_current_profile_id

router = APIRouter(prefix="/api/teams", tags=["teams"])


def team_detail(team: Team) -> TeamDetail:
    leader = team.team_leader
    return TeamDetail(
        id=team.team_id,
        productName=team.product_name,
        roles=team.roles,
        productDescription=team.product_description,
        leader=TeamLeader(name=leader.name, username=leader.username, avatar=leader.avatar, role=leader.role),
        productStage=team.product_stage,
        teamSize=team.team_size,
        equitySplit=team.equity_split,
        createdAt=team.created_at,
    )


@router.get("", response_model=ResponseModel)
async def list_teams(
    limit: int = Query(settings.DEFAULT_LIST_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    teams = await TeamService.get_teams(db, limit)
    return ResponseModel(
        data=[TeamListItem(**team_detail(t).model_dump(include=set(TeamListItem.model_fields))) for t in teams]
    )


@router.get("/{team_id}", response_model=ResponseModel)
async def get_team(team_id: str, db: AsyncSession = Depends(get_db)):
    team = await TeamService.get_team_by_id(db, team_id)
    return ResponseModel(data=team_detail(team))


@router.post("", response_model=ResponseModel)
async def create_team(
    team_data: TeamCreate,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    """
    Create a team led by the current user
    """
    team = await TeamService.create_team(db, current_profile_id, team_data)
    return ResponseModel(message="Team created", data=team_detail(team))
