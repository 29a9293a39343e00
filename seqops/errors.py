"""
error taxonomy raised by the sequence operators.

every error is raised where it is detected: terminal operators raise during the
call, lazy operators raise when the consumer pulls the offending element.
"""
from typing import Any, Optional


class SequenceError(Exception):
    """base class for every error raised by seqops itself."""


class NotFoundError(SequenceError, ValueError):
    """no element satisfies the condition (first, last, single)."""

    def __init__(self, message: str = "no element satisfies the condition"):
        super().__init__(message)


class MultipleMatchesError(SequenceError, ValueError):
    """more than one element satisfies the condition (single)."""

    def __init__(self, first_match: Any, second_match: Any,
                 message: str = "more than one element satisfies the condition"):
        super().__init__(message)
        self.first_match = first_match
        self.second_match = second_match


class IndexOutOfRangeError(SequenceError, IndexError):
    """the requested position is negative or past the end of the sequence."""

    def __init__(self, index: int, message: Optional[str] = None):
        super().__init__(message or f"index {index} is out of range")
        self.index = index
