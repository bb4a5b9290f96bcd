"""Domain entities for workspace settings and role permissions."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

WEEK_DAYS = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]
MODULES = ["timesheet", "task", "project", "client", "report"]
PERMISSIONS = ["view", "create", "edit", "delete"]


@dataclass
class GeneralSettings:
    """Workspace-wide working-time settings (a single object, not a collection)."""

    daily_working_hours: float = 8
    weekly_working_days: list[str] = field(default_factory=lambda: WEEK_DAYS[:5])


@dataclass
class Permission:
    view: bool = False
    create: bool = False
    edit: bool = False
    delete: bool = False


@dataclass
class ModulePermissions:
    timesheet: Permission = field(default_factory=Permission)
    task: Permission = field(default_factory=Permission)
    project: Permission = field(default_factory=Permission)
    client: Permission = field(default_factory=Permission)
    report: Permission = field(default_factory=Permission)


@dataclass
class Role:
    """A named permission set. ``user_count`` is a denormalized counter."""

    name: str
    permissions: ModulePermissions = field(default_factory=ModulePermissions)
    user_count: int = 0
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def allows(self, module: str, permission: str) -> bool:
        """Look up one module/permission flag; unknown names are never allowed."""
        if module not in MODULES or permission not in PERMISSIONS:
            return False
        return bool(getattr(getattr(self.permissions, module), permission))
