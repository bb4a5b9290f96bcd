"""Domain entity for users (employees)."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4

from .references import DEFAULT_AVATAR, ClientRef, PersonRef, unassigned_person


class UserStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class AssignedProject:
    """Snapshot of a project a user has been assigned to."""

    id: str
    code: str
    name: str
    client: ClientRef
    type: str = ""
    billing_type: str = ""
    start_date: date | None = None
    end_date: date | None = None
    assigned_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class User:
    """An employee.

    ``total_logged_hours`` is a denormalized sum kept up to date by the
    timesheet service.
    """

    first_name: str
    last_name: str
    email: str
    code: str = ""
    role: str = ""
    department: str = ""
    reporting_manager: PersonRef = field(default_factory=unassigned_person)
    status: UserStatus = UserStatus.ACTIVE
    avatar: str = DEFAULT_AVATAR
    total_logged_hours: float = 0.0
    assigned_projects: list[AssignedProject] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def touch(self) -> None:
        """Refresh the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def as_person(self) -> PersonRef:
        """Snapshot of this user for embedding in other records."""
        return PersonRef(id=self.id, name=self.full_name, email=self.email, avatar=self.avatar)
