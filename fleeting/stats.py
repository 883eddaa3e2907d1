"""Writing activity statistics."""

from datetime import date, timedelta
from typing import Iterable

from fleeting.models import DayWordCount, WritingStats


def count_words(text: str) -> int:
    """Count whitespace-separated non-empty tokens in the trimmed text."""
    return len(text.strip().split())


def longest_streak(days: Iterable[date]) -> int:
    """Length of the longest run of consecutive calendar days.

    Duplicate days are ignored. An empty input has a streak of 0.
    """
    ordered = sorted(set(days))
    if not ordered:
        return 0

    current = best = 1
    for previous, day in zip(ordered, ordered[1:]):
        if day - previous == timedelta(days=1):
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def calculate_writing_stats(day_counts: list[DayWordCount]) -> WritingStats:
    """Summarize per-day word counts.

    Args:
        day_counts: Per-day totals, as returned by
            ``EntryStore.word_counts_by_day()``.

    Returns:
        Total words, integer average per writing day, and longest streak.
    """
    if not day_counts:
        return WritingStats()

    ordered = sorted(day_counts, key=lambda item: item.day)
    total = sum(item.count for item in ordered)

    return WritingStats(
        total_words=total,
        average_words=total // len(ordered),
        longest_streak=longest_streak(item.day for item in ordered),
        days=ordered,
    )
