"""Pydantic DTOs for timesheets."""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class PeriodInput(BaseModel):
    start_date: dt.date
    end_date: dt.date

    @model_validator(mode="after")
    def _check_order(self) -> "PeriodInput":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class DayEntryInput(BaseModel):
    """One day's hours. ``id`` is kept when replacing entries of an existing timesheet."""

    id: str | None = None
    date: dt.date
    hours: float = Field(..., ge=0, le=24)
    project_id: str = ""
    project_code: str = ""
    project_name: str = ""
    activity_id: str = ""
    activity_name: str = ""
    task_id: str = ""
    task_name: str = ""
    billable: bool = True
    description: str | None = None


class TimesheetCreate(BaseModel):
    user_id: str
    period: PeriodInput
    entries: list[DayEntryInput] = Field(default_factory=list)


class TimesheetUpdate(BaseModel):
    period: PeriodInput | None = None
    entries: list[DayEntryInput] | None = None


class DayEntryUpdate(BaseModel):
    hours: float | None = Field(None, ge=0, le=24)
    billable: bool | None = None
    description: str | None = None


class TimesheetDecision(BaseModel):
    """Approve or reject a batch of timesheets."""

    timesheet_ids: list[str] = Field(..., min_length=1)
    action: Literal["approve", "reject"]
    comment: str | None = None
