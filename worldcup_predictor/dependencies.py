from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from .database import get_session
from .engine.group_matches import is_valid_group_letter
from .models.prediction_set import PredictionSet


async def get_prediction_set(
    set_id: int,
    db: Session = Depends(get_session)
) -> PredictionSet:
    """Resolve the prediction set named in the path, 404 if it does not exist."""
    prediction_set = db.get(PredictionSet, set_id)
    if not prediction_set:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Prediction set not found"
        )
    return prediction_set


async def valid_group_letter(group_letter: str) -> str:
    group_letter = group_letter.upper()
    if not is_valid_group_letter(group_letter):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return group_letter
