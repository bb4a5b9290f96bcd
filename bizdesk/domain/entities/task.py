"""Domain entity for tasks."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4

from .references import ActivityRef, PersonRef, ProjectRef


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class TaskStatus(str, Enum):
    TO_DO = "To Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class ActivityType(str, Enum):
    FEATURE = "Feature"
    BUG = "Bug"
    ENHANCEMENT = "Enhancement"
    RESEARCH = "Research"
    DOCUMENTATION = "Documentation"


@dataclass
class Task:
    """A piece of work assigned to one user under a project activity."""

    name: str
    project: ProjectRef
    activity: ActivityRef
    assigned_to: PersonRef
    assigned_by: PersonRef
    task_reviewer: PersonRef
    code: str = ""
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TO_DO
    activity_type: ActivityType = ActivityType.FEATURE
    start_date: date | None = None
    due_date: date | None = None
    planned_hours: float = 0.0
    frequency: str = "1 Week"
    comments: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Refresh the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)
