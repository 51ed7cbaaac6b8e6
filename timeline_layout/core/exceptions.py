"""
Custom exceptions for the timeline layout core.

The layout functions degrade gracefully on odd input; these are raised only
when a caller breaks the input contract.
"""

from typing import Any, Optional


class TimelineError(Exception):
    """Base exception for timeline_layout."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class DuplicateError(TimelineError):
    """Duplicate identifier where identifiers must be unique."""

    pass


class ValidationError(TimelineError):
    """Input that cannot be laid out."""

    pass
