"""Domain entities for collection queries and report statistics."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a filtered, sorted collection plus the counts behind it."""

    data: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 0
    total_pages: int = 0


@dataclass
class ReportStats:
    """Status breakdown of one collection for the reports screen."""

    total_records: int = 0
    active_records: int = 0
    inactive_records: int = 0
    completed_records: int | None = None
    pending_records: int | None = None
