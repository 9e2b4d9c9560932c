from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint


class KnockoutPick(SQLModel, table=True):
    __tablename__ = "knockout_picks"
    __table_args__ = (
        UniqueConstraint("prediction_set_id", "match_id", name="unique_set_knockout_match"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    prediction_set_id: int = Field(foreign_key="prediction_sets.id", index=True)
    match_id: str = Field(index=True)  # M73-M104
    winner_team_id: int = Field(foreign_key="teams.id")

    # Optional scoreline, informational only
    score_a: Optional[int] = Field(default=None)
    score_b: Optional[int] = Field(default=None)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
