from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint


class GroupMatchScore(SQLModel, table=True):
    __tablename__ = "group_match_scores"
    __table_args__ = (
        UniqueConstraint("prediction_set_id", "group_letter", "match_number", name="unique_set_group_match"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    prediction_set_id: int = Field(foreign_key="prediction_sets.id", index=True)
    group_letter: str = Field(index=True)
    match_number: int  # 1-6

    score_a: Optional[int] = Field(default=None)
    score_b: Optional[int] = Field(default=None)

    # Bumped on every save of the group, used for optimistic locking
    version: int = Field(default=1)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
