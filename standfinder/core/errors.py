"""
Stand Finder exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus specialized subclasses for the parser, the matcher and the catalog loader.
"""

from typing import Any, Dict, Optional


class StandFinderError(Exception):
    """Base exception for Stand Finder errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class InvalidFormatError(StandFinderError, ValueError):
    """Chart URL does not match the expected grammar."""

    pass


class EmptyCatalogError(StandFinderError):
    """Matcher was given a catalog with no entries."""

    pass


class CatalogError(StandFinderError):
    """Catalog file missing, unreadable, or holding invalid records."""

    pass
