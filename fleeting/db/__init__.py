"""Persistence layer for Fleeting."""

from fleeting.db.store import DataStore

__all__ = ["DataStore"]
