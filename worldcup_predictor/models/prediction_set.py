from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field


class PredictionSet(SQLModel, table=True):
    __tablename__ = "prediction_sets"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    # The official set holds the real results entered by admins
    is_official: bool = Field(default=False, index=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
