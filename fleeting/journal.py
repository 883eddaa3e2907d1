"""Entry store: today's draft and the list of saved journal entries.

The store keeps one entry per local calendar day. Text is composed in an
in-memory draft and written to the record store only when ``save_draft`` is
called; saving again on the same day overwrites that day's entry.

Storage failures never escape this module. They are logged, passed to the
optional ``on_error`` hook, and absorbed: reads come back empty and a failed
write keeps the draft so the next save can retry it.
"""

import logging
import sqlite3
import uuid
from collections import defaultdict
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Optional

from fleeting.db.store import DataStore
from fleeting.models import DayWordCount, JournalEntry
from fleeting.stats import count_words

logger = logging.getLogger(__name__)

# Errors raised by the record store that are absorbed here. UnicodeError
# covers text SQLite cannot encode, such as lone surrogates from argv.
STORAGE_ERRORS = (sqlite3.Error, OSError, UnicodeError)

Listener = Callable[["EntryStore"], None]
ErrorHook = Callable[[str, Exception], None]


def local_now() -> datetime:
    """Current instant in the local timezone."""
    return datetime.now().astimezone()


class EntryStore:
    """Owns the journal entries and today's draft."""

    def __init__(
        self,
        records: Optional[DataStore],
        now: Callable[[], datetime] = local_now,
        on_error: Optional[ErrorHook] = None,
    ):
        """Initialize the entry store.

        Args:
            records: Backing record store, or None if it could not be opened.
                Without one, loads yield no entries and saves keep the draft.
            now: Clock returning the current timezone-aware instant.
            on_error: Called with the operation name and the exception for
                every storage failure that is absorbed.
        """
        self._records = records
        self._now = now
        self.on_error = on_error
        self._entries: list[JournalEntry] = []
        self._draft = ""
        self._listeners: list[Listener] = []

    @property
    def entries(self) -> list[JournalEntry]:
        """Loaded entries, most recently created first."""
        return list(self._entries)

    @property
    def draft(self) -> str:
        return self._draft

    def set_draft(self, text: str) -> None:
        """Replace the draft text."""
        if text == self._draft:
            return
        self._draft = text
        self._notify()

    def today(self) -> date:
        """Local calendar day of the current instant."""
        return self._now().date()

    def entry_for_today(self) -> Optional[JournalEntry]:
        """The loaded entry for today, if one exists."""
        return self._find_entry_for_day(self.today())

    # ==================== Operations ====================

    def load(self) -> list[JournalEntry]:
        """Reload all entries from the record store.

        If today already has an entry and the draft is empty, the draft is
        filled with that entry's content. Unsaved draft text is never
        replaced.

        Returns:
            Entries ordered by creation time, newest first. Empty if the
            record store is unavailable or the read fails.
        """
        entries: list[JournalEntry] = []
        if self._records is None:
            logger.debug("No record store available; loading no entries")
        else:
            try:
                entries = self._records.get_entries()
            except STORAGE_ERRORS as e:
                self.report_failure("load", e)

        self._entries = sorted(entries, key=lambda entry: entry.created_at, reverse=True)

        todays_entry = self.entry_for_today()
        if todays_entry is not None and not self._draft:
            self._draft = todays_entry.content

        self._notify()
        return self.entries

    def save_draft(self) -> bool:
        """Save the draft as today's entry.

        Creates today's entry on the first save of the day and overwrites its
        content and word count afterwards. A blank draft is ignored.

        Returns:
            True if the draft was written. On success the draft is cleared and
            the entries are reloaded; on failure the draft is kept.
        """
        content = self._draft.strip()
        if not content:
            return False

        now = self._now()
        today = now.date()
        word_count = count_words(content)

        if self._records is None:
            self.report_failure("save", OSError("record store is not available"))
            return False

        try:
            existing = self._find_entry_for_day(today) or self._records.get_entry_for_day(today)
            updated = existing is not None and self._records.update_entry_content(
                existing.id, content, word_count
            )
            if updated:
                logger.info("Updated journal entry %s (%d words)", existing.id, word_count)
            else:
                entry = JournalEntry(
                    id=str(uuid.uuid4()),
                    day=today,
                    content=content,
                    created_at=now,
                    word_count=word_count,
                )
                self._records.insert_entry(entry)
                logger.info("Created journal entry %s for %s", entry.id, entry.day)
        except STORAGE_ERRORS as e:
            self.report_failure("save", e)
            return False

        self._draft = ""
        self.load()
        return True

    def word_counts_by_day(self) -> list[DayWordCount]:
        """Total words per calendar day, earliest day first."""
        totals: dict[date, int] = defaultdict(int)
        for entry in self._entries:
            totals[entry.day] += entry.word_count

        return [DayWordCount(day=day, count=totals[day]) for day in sorted(totals)]

    # ==================== Change notification ====================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the store after every change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Entry store listener %r failed", listener)

    # ==================== Helpers ====================

    def _find_entry_for_day(self, day: date) -> Optional[JournalEntry]:
        for entry in self._entries:
            if entry.day == day:
                return entry
        return None

    def report_failure(self, operation: str, error: Exception) -> None:
        """Log an absorbed storage failure and pass it to ``on_error``."""
        logger.error("Failed to %s journal entries: %s", operation, error)
        if self.on_error is not None:
            try:
                self.on_error(operation, error)
            except Exception:
                logger.exception("Storage error hook failed")


def open_entry_store(
    db_path: Path,
    now: Callable[[], datetime] = local_now,
    on_error: Optional[ErrorHook] = None,
) -> EntryStore:
    """Open the record store at ``db_path`` and build an entry store on it.

    A record store that cannot be opened is logged and reported to
    ``on_error``; the returned entry store then works without one.
    Entries are loaded before returning.
    """
    try:
        store = EntryStore(DataStore(db_path), now=now, on_error=on_error)
    except STORAGE_ERRORS as e:
        store = EntryStore(None, now=now, on_error=on_error)
        store.report_failure("open", e)

    store.load()
    return store
