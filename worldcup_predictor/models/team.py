from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field


class Team(SQLModel, table=True):
    __tablename__ = "teams"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    code: Optional[str] = Field(default=None)  # FIFA trigram
    flag_url: Optional[str] = Field(default=None)
    group_letter: Optional[str] = Field(default=None, index=True)  # A-L
    group_position: Optional[int] = Field(default=None)  # Draw position 1-4 within the group

    # Placeholder for an intercontinental/UEFA playoff winner
    is_playoff_slot: bool = Field(default=False)
    playoff_winner_id: Optional[int] = Field(default=None, foreign_key="teams.id")

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
