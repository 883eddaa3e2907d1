"""SQLite data store for Fleeting."""

import logging
import sqlite3
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from fleeting.models import JournalEntry

logger = logging.getLogger(__name__)

# Raised when a stored row cannot be turned back into an entry
DECODE_ERRORS = (ValueError, TypeError, ValidationError)


class DataStore:
    """SQLite-based record store for journal entries.

    Every method opens its own connection and closes it before returning.
    Storage errors (``sqlite3.Error``, ``OSError``) propagate to the caller.
    Rows that cannot be decoded are logged and skipped.
    """

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            # One row per local calendar day
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS entries (
                    id TEXT PRIMARY KEY,
                    day TEXT NOT NULL UNIQUE,
                    content TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    word_count INTEGER NOT NULL
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_entries_created_at
                ON entries(created_at)
            """)

            conn.commit()
        finally:
            conn.close()

    # ==================== Entries ====================

    def insert_entry(self, entry: JournalEntry) -> None:
        """Insert a new journal entry.

        Args:
            entry: Entry to insert. Its day must not already have an entry.

        Raises:
            sqlite3.IntegrityError: If the id or day is already taken.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO entries (id, day, content, created_at, word_count)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    entry.id,
                    entry.day.isoformat(),
                    entry.content,
                    _to_storage_time(entry.created_at),
                    entry.word_count,
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def update_entry_content(self, entry_id: str, content: str, word_count: int) -> bool:
        """Overwrite the content and word count of an entry.

        ``created_at`` and ``day`` are never touched.

        Args:
            entry_id: Exact id of the entry to update.
            content: New text body.
            word_count: Word count of the new text.

        Returns:
            True if an entry with that id existed.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE entries SET content = ?, word_count = ? WHERE id = ?",
                (content, word_count, entry_id),
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def get_entry(self, entry_id: str) -> Optional[JournalEntry]:
        """Get an entry by its id."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, day, content, created_at, word_count
                FROM entries
                WHERE id = ?
                """,
                (entry_id,),
            )
            row = cursor.fetchone()
            return _decode_row(row) if row else None
        finally:
            conn.close()

    def get_entry_for_day(self, day: date) -> Optional[JournalEntry]:
        """Get the entry stored for a calendar day, if any."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, day, content, created_at, word_count
                FROM entries
                WHERE day = ?
                """,
                (day.isoformat(),),
            )
            row = cursor.fetchone()
            return _decode_row(row) if row else None
        finally:
            conn.close()

    def get_entries(self) -> list[JournalEntry]:
        """Get all entries, most recently created first."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, day, content, created_at, word_count
                FROM entries
                ORDER BY created_at DESC, id ASC
                """
            )
            entries = (_decode_row(row) for row in cursor.fetchall())
            return [entry for entry in entries if entry is not None]
        finally:
            conn.close()


def _to_storage_time(value: datetime) -> str:
    """Serialize an instant as UTC ISO-8601 so text order matches time order."""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.astimezone(timezone.utc).isoformat()


def _row_to_entry(row: sqlite3.Row) -> JournalEntry:
    return JournalEntry(
        id=row["id"],
        day=date.fromisoformat(row["day"]),
        content=row["content"],
        created_at=datetime.fromisoformat(row["created_at"]).astimezone(),
        word_count=row["word_count"],
    )


def _decode_row(row: sqlite3.Row) -> Optional[JournalEntry]:
    """Decode a row, or log and return None if its fields are malformed."""
    try:
        return _row_to_entry(row)
    except DECODE_ERRORS as e:
        logger.warning("Skipping unreadable journal entry %r: %s", row["id"], e)
        return None
