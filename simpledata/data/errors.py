"""
Error taxonomy for loading and querying record collections.
"""
from __future__ import annotations

from pathlib import Path


class DataToolError(Exception):
    """Base class for every error raised by simpledata."""


class LoadFailure(DataToolError):
    """A source could not be read or did not match the expected columns/types."""

    def __init__(self, path: str | Path, record_type: str, reason: str) -> None:
        self.path = Path(path)
        self.record_type = record_type
        self.reason = reason
        super().__init__(f"Could not load {record_type} records from {self.path}: {reason}")


class NotFoundError(DataToolError, LookupError):
    """A named lookup matched no record."""


class EmptyAggregateError(DataToolError, ValueError):
    """An aggregation ran over an empty filtered set."""


class NoCustomersError(NotFoundError, EmptyAggregateError):
    """Max-premium lookup over an empty customer collection."""

    def __init__(self) -> None:
        super().__init__("No customers loaded — cannot pick a highest-premium customer")
