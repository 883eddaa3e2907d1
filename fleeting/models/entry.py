"""JournalEntry data model."""

from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, Field


class JournalEntry(BaseModel):
    """Represents one day's journal entry."""

    id: str = Field(..., min_length=1, description="Opaque unique identifier")
    day: date_type = Field(..., description="Local calendar day the entry belongs to")
    content: str = Field(..., description="Entry text")
    created_at: datetime = Field(..., description="Instant the entry was first saved")
    word_count: int = Field(..., ge=0, description="Whitespace-separated token count")

    model_config = {"frozen": True}
