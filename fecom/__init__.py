"""Fetch YouTube comments for videos matching a query within a date range."""

__version__ = "0.1.0"
