from .base_service import RecordService
from .client_service import ClientService
from .project_service import ProjectService
from .task_service import TaskService
from .user_service import UserService
from .timesheet_service import TimesheetService
from .settings_service import SettingsService
from .report_service import ReportService, resolve_date_range

__all__ = [
    "RecordService",
    "ClientService",
    "ProjectService",
    "TaskService",
    "UserService",
    "TimesheetService",
    "SettingsService",
    "ReportService",
    "resolve_date_range",
]
