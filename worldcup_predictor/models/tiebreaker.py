from datetime import datetime, UTC
from typing import Iterable, List, Optional
from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field, UniqueConstraint


def tied_key_for(team_ids: Iterable[int]) -> str:
    """Order-independent key of a tied block, e.g. "3,7,12"."""
    return ",".join(str(team_id) for team_id in sorted(team_ids))


class GroupTiebreaker(SQLModel, table=True):
    __tablename__ = "group_tiebreakers"
    __table_args__ = (
        UniqueConstraint("prediction_set_id", "group_letter", "tied_key", name="unique_set_group_tied_block"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    prediction_set_id: int = Field(foreign_key="prediction_sets.id", index=True)
    group_letter: str
    # One decision per tied block; a group can hold two separate blocks
    tied_key: str

    tied_team_ids: List[int] = Field(default_factory=list, sa_column=Column(JSON))
    resolved_order: List[int] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
