from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlmodel import Session

from worldcup_predictor.database import get_session
from worldcup_predictor.dependencies import get_prediction_set, valid_group_letter
from worldcup_predictor.engine.group_matches import ALL_GROUPS, MATCHES_PER_GROUP, get_match_positions
from worldcup_predictor.exceptions import InvalidTiebreakerDecisionError, StaleGroupVersionError
from worldcup_predictor.models.prediction_set import PredictionSet
from worldcup_predictor.services.groups import delete_tiebreaker, save_group_scores, save_tiebreaker
from worldcup_predictor.services.standings import (
    calculate_group_standings,
    get_group_scores,
    get_group_teams,
    get_group_version,
    get_tiebreaker_decisions,
)

router = APIRouter(prefix="/api/sets/{set_id}", tags=["groups"])


class MatchScore(BaseModel):
    match_number: int = Field(ge=1, le=MATCHES_PER_GROUP)
    score_a: Optional[int] = Field(default=None, ge=0)
    score_b: Optional[int] = Field(default=None, ge=0)


class GroupScoresUpdate(BaseModel):
    """Schema for saving a group's scores; `version` is the one last read."""
    scores: List[MatchScore]
    version: Optional[int] = None


class TiebreakerCreate(BaseModel):
    tied_team_ids: List[int]
    resolved_order: List[int]


def _group_payload(db: Session, set_id: int, group_letter: str) -> dict:
    result = calculate_group_standings(db, set_id, group_letter)
    teams = [team.id for team in get_group_teams(db, group_letter)]
    scores = get_group_scores(db, set_id, group_letter)
    decisions = get_tiebreaker_decisions(db, set_id, group_letter)

    matches = []
    for number in range(1, MATCHES_PER_GROUP + 1):
        pos_a, pos_b = get_match_positions(number)
        score_a, score_b = scores.get(number, (None, None))
        matches.append({
            "match_number": number,
            "team_a_id": teams[pos_a - 1] if len(teams) >= pos_a else None,
            "team_b_id": teams[pos_b - 1] if len(teams) >= pos_b else None,
            "score_a": score_a,
            "score_b": score_b,
        })

    data = result.to_dict()
    data.update({
        "matches": matches,
        "version": get_group_version(db, set_id, group_letter),
        "tiebreakers": [decision.to_dict() for decision in decisions],
    })
    return data


@router.get("/groups")
async def list_groups(
    prediction_set: PredictionSet = Depends(get_prediction_set),
    db: Session = Depends(get_session)
):
    return {group: _group_payload(db, prediction_set.id, group) for group in ALL_GROUPS}


@router.get("/groups/{group_letter}")
async def get_group(
    prediction_set: PredictionSet = Depends(get_prediction_set),
    group_letter: str = Depends(valid_group_letter),
    db: Session = Depends(get_session)
):
    return _group_payload(db, prediction_set.id, group_letter)


@router.put("/groups/{group_letter}/scores")
async def update_group_scores(
    data: GroupScoresUpdate,
    prediction_set: PredictionSet = Depends(get_prediction_set),
    group_letter: str = Depends(valid_group_letter),
    db: Session = Depends(get_session)
):
    """Save scores for a group; a changed score clears its tiebreaker decisions."""
    numbers = [score.match_number for score in data.scores]
    if len(numbers) != len(set(numbers)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Each match number may appear only once"
        )

    scores = {score.match_number: (score.score_a, score.score_b) for score in data.scores}
    try:
        result = save_group_scores(db, prediction_set.id, group_letter, scores, data.version)
    except StaleGroupVersionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.to_dict())

    response = _group_payload(db, prediction_set.id, group_letter)
    response.update({
        "changed": result.changed,
        "tiebreaker_cleared": result.tiebreaker_cleared,
        "cleared_picks": result.cleared_picks,
    })
    return response


@router.put("/groups/{group_letter}/tiebreaker")
async def set_group_tiebreaker(
    data: TiebreakerCreate,
    prediction_set: PredictionSet = Depends(get_prediction_set),
    group_letter: str = Depends(valid_group_letter),
    db: Session = Depends(get_session)
):
    try:
        _, cleared_picks = save_tiebreaker(
            db, prediction_set.id, group_letter, data.tied_team_ids, data.resolved_order
        )
    except InvalidTiebreakerDecisionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_dict())

    response = _group_payload(db, prediction_set.id, group_letter)
    response["cleared_picks"] = cleared_picks
    return response


@router.delete("/groups/{group_letter}/tiebreaker")
async def remove_group_tiebreaker(
    prediction_set: PredictionSet = Depends(get_prediction_set),
    group_letter: str = Depends(valid_group_letter),
    db: Session = Depends(get_session)
):
    removed, cleared_picks = delete_tiebreaker(db, prediction_set.id, group_letter)
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No tiebreaker decisions stored for this group"
        )
    return {"success": True, "cleared_picks": cleared_picks}
