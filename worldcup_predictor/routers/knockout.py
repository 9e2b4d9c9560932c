from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlmodel import Session

from worldcup_predictor.database import get_session
from worldcup_predictor.dependencies import get_prediction_set
from worldcup_predictor.engine.bracket import get_bracket_match
from worldcup_predictor.engine.third_place import STATUS_INVALID_COMBINATION
from worldcup_predictor.exceptions import UnknownMatchError
from worldcup_predictor.models.prediction_set import PredictionSet
from worldcup_predictor.services.knockout import clear_knockout_winner, get_bracket_view, record_knockout_winner
from worldcup_predictor.services.third_place import get_third_place_ranking

router = APIRouter(prefix="/api/sets/{set_id}", tags=["knockout"])


class WinnerPick(BaseModel):
    """Schema for picking the winner of a knockout match."""
    team_id: int
    score_a: Optional[int] = Field(default=None, ge=0)
    score_b: Optional[int] = Field(default=None, ge=0)


def _check_match(match_id: str) -> str:
    match_id = match_id.upper()
    try:
        get_bracket_match(match_id)
    except UnknownMatchError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())
    return match_id


@router.get("/third-place")
async def third_place_ranking(
    prediction_set: PredictionSet = Depends(get_prediction_set),
    db: Session = Depends(get_session)
):
    """
    Ranking of the 12 third-placed teams and the resulting slot assignment.
    An impossible set of qualifying groups is reported as 422.
    """
    result = get_third_place_ranking(db, prediction_set.id)
    if result.status == STATUS_INVALID_COMBINATION:
        return JSONResponse(status_code=422, content=result.to_dict())
    return result.to_dict()


@router.get("/bracket")
async def bracket(
    prediction_set: PredictionSet = Depends(get_prediction_set),
    db: Session = Depends(get_session)
):
    return get_bracket_view(db, prediction_set.id)


@router.put("/bracket/{match_id}/winner")
async def pick_winner(
    match_id: str,
    data: WinnerPick,
    prediction_set: PredictionSet = Depends(get_prediction_set),
    db: Session = Depends(get_session)
):
    match_id = _check_match(match_id)
    result = record_knockout_winner(
        db, prediction_set.id, match_id, data.team_id, data.score_a, data.score_b
    )
    if not result.accepted:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.to_dict())

    return {
        "success": True,
        "match_id": match_id,
        "winner_team_id": data.team_id,
        "cleared": result.cleared,
    }


@router.delete("/bracket/{match_id}/winner")
async def clear_winner(
    match_id: str,
    prediction_set: PredictionSet = Depends(get_prediction_set),
    db: Session = Depends(get_session)
):
    match_id = _check_match(match_id)
    cleared = clear_knockout_winner(db, prediction_set.id, match_id)
    return {"success": True, "cleared": cleared}
