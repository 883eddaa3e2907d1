"""Writing statistics models."""

from datetime import date as date_type

from pydantic import BaseModel, Field


class DayWordCount(BaseModel):
    """Total words written on one calendar day."""

    day: date_type = Field(..., description="Local calendar day")
    count: int = Field(..., ge=0, description="Sum of entry word counts for the day")

    model_config = {"frozen": True}


class WritingStats(BaseModel):
    """Aggregate writing activity across all days."""

    total_words: int = Field(default=0, ge=0, description="Words written overall")
    average_words: int = Field(default=0, ge=0, description="Average words per writing day")
    longest_streak: int = Field(default=0, ge=0, description="Longest run of consecutive days")
    days: list[DayWordCount] = Field(default_factory=list, description="Per-day totals, ascending")

    model_config = {"frozen": True}
