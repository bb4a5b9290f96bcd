"""Domain entities for projects, their activities and team members."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4

from .references import ClientRef, PersonRef, unassigned_person


class ProjectType(str, Enum):
    POC = "POC"
    DEVELOPMENT = "Development"
    MAINTENANCE = "Maintenance"
    CONSULTING = "Consulting"


class BillingType(str, Enum):
    BILLABLE = "Billable"
    NON_BILLABLE = "Non-Billable"
    INTERNAL = "Internal"


class ProjectStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class ActivityStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


@dataclass
class Activity:
    """A unit of work inside a project; tasks are filed against activities."""

    name: str
    project_id: str
    description: str = ""
    status: ActivityStatus = ActivityStatus.PENDING
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class TeamMember:
    """Snapshot of a user assigned to a project."""

    id: str
    name: str
    email: str = ""
    avatar: str = ""
    role: str = ""
    assigned_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Project:
    """A piece of client work with its own team and activities."""

    name: str
    client: ClientRef
    code: str = ""
    type: ProjectType = ProjectType.DEVELOPMENT
    start_date: date | None = None
    end_date: date | None = None
    duration: str = ""
    billing_type: BillingType = BillingType.BILLABLE
    status: ProjectStatus = ProjectStatus.ACTIVE
    account_manager: PersonRef = field(default_factory=unassigned_person)
    project_manager: PersonRef = field(default_factory=unassigned_person)
    assigned_team: list[TeamMember] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Refresh the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def find_activity(self, activity_id: str) -> Activity | None:
        return next((a for a in self.activities if a.id == activity_id), None)

    def has_member(self, user_id: str) -> bool:
        return any(member.id == user_id for member in self.assigned_team)


def project_duration(start: date | None, end: date | None) -> str:
    """Human-readable duration in 30-day months, rounded up ("3 Months")."""
    if start is None or end is None:
        return ""
    months = math.ceil(abs((end - start).days) / 30)
    return f"{months} Month{'s' if months > 1 else ''}"
