"""Domain entities for timesheets — a user's hours over a period, with an approval trail."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4

from .references import PersonRef


class TimesheetStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class TimesheetActionType(str, Enum):
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"
    UPDATED = "updated"


@dataclass
class TimesheetPeriod:
    start_date: date
    end_date: date


@dataclass
class TimesheetDayEntry:
    """Hours booked on one day against a project/activity/task."""

    date: date
    hours: float
    project_id: str = ""
    project_code: str = ""
    project_name: str = ""
    activity_id: str = ""
    activity_name: str = ""
    task_id: str = ""
    task_name: str = ""
    billable: bool = True
    description: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class TimesheetActivity:
    """One line of the approval trail."""

    type: TimesheetActionType
    performed_by: PersonRef
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    comment: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class Timesheet:
    user_id: str
    user_name: str
    approver_id: str
    approver_name: str
    period: TimesheetPeriod
    user_avatar: str = ""
    approver_avatar: str = ""
    department: str = ""
    status: TimesheetStatus = TimesheetStatus.PENDING
    submitted_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    approved_date: datetime | None = None
    rejected_date: datetime | None = None
    total_hours: float = 0.0
    entries: list[TimesheetDayEntry] = field(default_factory=list)
    activity_log: list[TimesheetActivity] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Refresh the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def recompute_total(self) -> float:
        """Recalculate total_hours from the day entries and return it."""
        self.total_hours = sum(entry.hours for entry in self.entries)
        return self.total_hours

    def find_entry(self, entry_id: str) -> TimesheetDayEntry | None:
        return next((e for e in self.entries if e.id == entry_id), None)

    def log(
        self,
        action: TimesheetActionType,
        performed_by: PersonRef,
        comment: str | None = None,
    ) -> TimesheetActivity:
        """Append an entry to the approval trail."""
        entry = TimesheetActivity(type=action, performed_by=performed_by, comment=comment)
        self.activity_log.append(entry)
        return entry

    def owner(self) -> PersonRef:
        return PersonRef(id=self.user_id, name=self.user_name, avatar=self.user_avatar)

    def approver(self) -> PersonRef:
        return PersonRef(id=self.approver_id, name=self.approver_name, avatar=self.approver_avatar)

    def mark_approved(self, comment: str | None = None) -> None:
        """Transition to approved and record it in the trail."""
        self.status = TimesheetStatus.APPROVED
        self.approved_date = datetime.now(timezone.utc)
        self.log(TimesheetActionType.APPROVED, self.approver(), comment)
        self.touch()

    def mark_rejected(self, comment: str | None = None) -> None:
        """Transition to rejected and record it in the trail."""
        self.status = TimesheetStatus.REJECTED
        self.rejected_date = datetime.now(timezone.utc)
        self.log(TimesheetActionType.REJECTED, self.approver(), comment)
        self.touch()


@dataclass
class TimesheetStats:
    total_entries: int = 0
    approved: int = 0
    pending: int = 0
    rejected: int = 0
