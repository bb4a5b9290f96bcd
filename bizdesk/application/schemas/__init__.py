from .query import FILTER_ALL, DateRange, QueryParams, ReportFilter
from .client import ClientCreate, ClientUpdate, ContactInput
from .project import ActivityCreate, ActivityUpdate, ProjectCreate, ProjectUpdate
from .task import TaskCreate, TaskUpdate
from .user import AssignProjects, UserCreate, UserUpdate
from .timesheet import (
    DayEntryInput,
    DayEntryUpdate,
    PeriodInput,
    TimesheetCreate,
    TimesheetDecision,
    TimesheetUpdate,
)
from .settings import (
    ModulePermissionsSchema,
    PermissionSchema,
    RoleInput,
    SettingsUpdate,
)

__all__ = [
    "FILTER_ALL",
    "DateRange",
    "QueryParams",
    "ReportFilter",
    "ClientCreate",
    "ClientUpdate",
    "ContactInput",
    "ActivityCreate",
    "ActivityUpdate",
    "ProjectCreate",
    "ProjectUpdate",
    "TaskCreate",
    "TaskUpdate",
    "AssignProjects",
    "UserCreate",
    "UserUpdate",
    "DayEntryInput",
    "DayEntryUpdate",
    "PeriodInput",
    "TimesheetCreate",
    "TimesheetDecision",
    "TimesheetUpdate",
    "ModulePermissionsSchema",
    "PermissionSchema",
    "RoleInput",
    "SettingsUpdate",
]
