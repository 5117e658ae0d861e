"""Exception types raised at the edges of the cost pipeline."""
from __future__ import annotations


class ProjectCostsError(Exception):
    """Base exception for project cost handling."""


class InvalidCostRecord(ProjectCostsError, ValueError):
    """A raw cost row could not be coerced into a CostRecord."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"Record {index}: {message}"
        super().__init__(message)


class SourceError(ProjectCostsError):
    """Fetching cost records from the statistics endpoint failed."""
