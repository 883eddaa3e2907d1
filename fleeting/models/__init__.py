"""Data models for Fleeting."""

from fleeting.models.entry import JournalEntry
from fleeting.models.stats import DayWordCount, WritingStats

__all__ = [
    "JournalEntry",
    "DayWordCount",
    "WritingStats",
]
