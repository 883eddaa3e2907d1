"""Fleeting - a one-entry-a-day journal for the terminal."""

__version__ = "0.1.0"
