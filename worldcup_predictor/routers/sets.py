import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlmodel import Session, select

from worldcup_predictor.database import get_session
from worldcup_predictor.dependencies import valid_group_letter
from worldcup_predictor.models.prediction_set import PredictionSet
from worldcup_predictor.models.team import Team

router = APIRouter(prefix="/api", tags=["sets"])
logger = logging.getLogger(__name__)


class TeamResponse(BaseModel):
    """Schema for team response."""
    id: int
    name: str
    code: Optional[str] = None
    flag_url: Optional[str] = None
    group_letter: Optional[str] = None
    group_position: Optional[int] = None
    is_playoff_slot: bool = False
    playoff_winner_id: Optional[int] = None


class PredictionSetCreate(BaseModel):
    """Schema for creating a prediction set."""
    name: str = Field(min_length=1, max_length=100)
    is_official: bool = False


class PredictionSetResponse(BaseModel):
    id: int
    name: str
    is_official: bool


@router.get("/teams", response_model=List[TeamResponse])
async def list_teams(
    group: Optional[str] = None,
    db: Session = Depends(get_session)
):
    """List teams, optionally for one group, in draw order."""
    statement = select(Team).order_by(Team.group_letter, Team.group_position, Team.id)
    if group:
        statement = statement.where(Team.group_letter == await valid_group_letter(group))
    return db.exec(statement).all()


@router.get("/sets", response_model=List[PredictionSetResponse])
async def list_prediction_sets(db: Session = Depends(get_session)):
    return db.exec(select(PredictionSet).order_by(PredictionSet.id)).all()


@router.post("/sets", response_model=PredictionSetResponse, status_code=status.HTTP_201_CREATED)
async def create_prediction_set(
    data: PredictionSetCreate,
    db: Session = Depends(get_session)
):
    """Create a prediction set. Only one set may hold the official results."""
    if data.is_official:
        existing = db.exec(select(PredictionSet).where(PredictionSet.is_official == True)).first()  # noqa: E712
        if existing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="An official results set already exists"
            )

    prediction_set = PredictionSet(name=data.name.strip(), is_official=data.is_official)
    db.add(prediction_set)
    db.commit()
    db.refresh(prediction_set)

    logger.info("Created prediction set %s (%s)", prediction_set.id, prediction_set.name)
    return prediction_set
