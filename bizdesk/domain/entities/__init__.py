from .references import ActivityRef, ClientRef, PersonRef, ProjectRef
from .client import Client, ClientStatus, Contact
from .project import (
    Activity,
    ActivityStatus,
    BillingType,
    Project,
    ProjectStatus,
    ProjectType,
    TeamMember,
    project_duration,
)
from .task import ActivityType, Task, TaskPriority, TaskStatus
from .user import AssignedProject, User, UserStatus
from .timesheet import (
    Timesheet,
    TimesheetActionType,
    TimesheetActivity,
    TimesheetDayEntry,
    TimesheetPeriod,
    TimesheetStats,
    TimesheetStatus,
)
from .settings import GeneralSettings, ModulePermissions, Permission, Role
from .query import Page, ReportStats

__all__ = [
    "ActivityRef",
    "ClientRef",
    "PersonRef",
    "ProjectRef",
    "Client",
    "ClientStatus",
    "Contact",
    "Activity",
    "ActivityStatus",
    "BillingType",
    "Project",
    "ProjectStatus",
    "ProjectType",
    "TeamMember",
    "project_duration",
    "ActivityType",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "AssignedProject",
    "User",
    "UserStatus",
    "Timesheet",
    "TimesheetActionType",
    "TimesheetActivity",
    "TimesheetDayEntry",
    "TimesheetPeriod",
    "TimesheetStats",
    "TimesheetStatus",
    "GeneralSettings",
    "ModulePermissions",
    "Permission",
    "Role",
    "Page",
    "ReportStats",
]
