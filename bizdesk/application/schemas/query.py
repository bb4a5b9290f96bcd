"""Pydantic DTOs for collection queries and report filters."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Filter value meaning "no constraint on this field"
FILTER_ALL = "all"


def _iso_instant(value: str | None) -> str | None:
    """Reject strings that are not ISO-8601 dates or timestamps."""
    if value is None:
        return None
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"not an ISO-8601 date or timestamp: {value!r}") from None
    return value


class DateRange(BaseModel):
    """Inclusive ISO-8601 date range. Only applied when both ends are set."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str | None = Field(None, alias="from", examples=["2024-01-01"])
    to: str | None = Field(None, examples=["2024-12-31"])

    @field_validator("from_", "to")
    @classmethod
    def validate_iso(cls, v: str | None) -> str | None:
        return _iso_instant(v)


class QueryParams(BaseModel):
    """Search / filter / sort / paginate request for one collection."""

    page: int | None = Field(None, ge=1)
    page_size: int | None = Field(None, ge=1)
    sort_by: str | None = Field(None, examples=["name", "client.name"])
    sort_direction: Literal["asc", "desc"] = "asc"
    search: str | None = None
    filters: dict[str, Any] = Field(
        default_factory=dict, examples=[{"status": "Active", "client.id": "1"}],
    )
    date_range: DateRange | None = None
    # Overrides the primary-date priority list for the date_range filter
    date_field: str | None = None


class ReportFilter(BaseModel):
    """Date preset used by report listings."""

    date_range: Literal[
        "all", "last7days", "thisMonth", "lastMonth", "yearToDate", "custom"
    ] = "all"
    custom_start_date: str | None = None
    custom_end_date: str | None = None

    @field_validator("custom_start_date", "custom_end_date")
    @classmethod
    def validate_iso(cls, v: str | None) -> str | None:
        return _iso_instant(v)
