"""Application service for the reports screen: status stats and dated listings.

Report listings reuse the query engine; a date preset is turned into a
DateRange on the report's natural date field.
"""

import calendar
import logging
from collections.abc import Callable
from datetime import date, timedelta
from typing import Any

from bizdesk.application.interfaces import RecordRepository
from bizdesk.application.schemas.query import DateRange, QueryParams, ReportFilter
from bizdesk.domain.entities import (
    Client,
    ClientStatus,
    Page,
    Project,
    ProjectStatus,
    ReportStats,
    Task,
    TaskStatus,
    Timesheet,
    TimesheetStatus,
    User,
    UserStatus,
)

logger = logging.getLogger(__name__)

_END_OF_DAY = "T23:59:59.999999+00:00"


def _day_range(start: date, end: date) -> DateRange:
    """Inclusive range covering whole days, so datetimes on ``end`` still match."""
    return DateRange(from_=start.isoformat(), to=f"{end.isoformat()}{_END_OF_DAY}")


def _custom_bound(value: str, *, end: bool) -> str:
    # Bare dates are widened to the whole day; full timestamps pass through.
    if len(value) == 10 and end:
        return f"{value}{_END_OF_DAY}"
    return value


def resolve_date_range(report_filter: ReportFilter | None, today: date) -> DateRange | None:
    """Translate a report date preset into an inclusive DateRange.

    Returns None when nothing should be filtered: no filter, ``all``, or a
    ``custom`` preset without both dates.
    """
    if report_filter is None:
        return None
    preset = report_filter.date_range

    if preset == "last7days":
        return _day_range(today - timedelta(days=7), today)
    if preset == "thisMonth":
        last_day = calendar.monthrange(today.year, today.month)[1]
        return _day_range(today.replace(day=1), today.replace(day=last_day))
    if preset == "lastMonth":
        last_of_previous = today.replace(day=1) - timedelta(days=1)
        return _day_range(last_of_previous.replace(day=1), last_of_previous)
    if preset == "yearToDate":
        return _day_range(date(today.year, 1, 1), today)
    if preset == "custom":
        if report_filter.custom_start_date and report_filter.custom_end_date:
            return DateRange(
                from_=_custom_bound(report_filter.custom_start_date, end=False),
                to=_custom_bound(report_filter.custom_end_date, end=True),
            )
        return None
    return None


def _count(records: list[Any], status: Any) -> int:
    return sum(1 for r in records if r.status == status)


class ReportService:
    """Read-only aggregation over the entity collections."""

    def __init__(
        self,
        timesheets: RecordRepository[Timesheet],
        users: RecordRepository[User],
        clients: RecordRepository[Client],
        projects: RecordRepository[Project],
        tasks: RecordRepository[Task],
        today: Callable[[], date] = date.today,
    ):
        self._timesheets = timesheets
        self._users = users
        self._clients = clients
        self._projects = projects
        self._tasks = tasks
        self._today = today

    async def _report(
        self,
        repository: RecordRepository[Any],
        report_filter: ReportFilter | None,
        date_field: str | None,
        params: QueryParams | None,
    ) -> Page[Any]:
        params = params.model_copy() if params else QueryParams()
        date_range = resolve_date_range(report_filter, self._today()) if date_field else None
        if date_range is not None:
            params.date_range = date_range
            params.date_field = date_field
            logger.debug(
                "Report on '%s' by %s: %s .. %s",
                repository.slot_key,
                date_field,
                date_range.from_,
                date_range.to,
            )
        return await repository.query(params)

    # ── Listings ────────────────────────────────────────────────────

    async def timesheet_report(
        self, report_filter: ReportFilter | None = None, params: QueryParams | None = None
    ) -> Page[Timesheet]:
        return await self._report(self._timesheets, report_filter, "submitted_date", params)

    async def user_report(
        self, report_filter: ReportFilter | None = None, params: QueryParams | None = None
    ) -> Page[User]:
        # Users have no natural report date; presets do not apply.
        return await self._report(self._users, report_filter, None, params)

    async def client_report(
        self, report_filter: ReportFilter | None = None, params: QueryParams | None = None
    ) -> Page[Client]:
        return await self._report(self._clients, report_filter, "onboarding_date", params)

    async def project_report(
        self, report_filter: ReportFilter | None = None, params: QueryParams | None = None
    ) -> Page[Project]:
        return await self._report(self._projects, report_filter, "start_date", params)

    async def task_report(
        self, report_filter: ReportFilter | None = None, params: QueryParams | None = None
    ) -> Page[Task]:
        return await self._report(self._tasks, report_filter, "due_date", params)

    # ── Stats ───────────────────────────────────────────────────────

    async def timesheet_stats(self) -> ReportStats:
        records = await self._timesheets.get_all()
        return ReportStats(
            total_records=len(records),
            active_records=_count(records, TimesheetStatus.APPROVED),
            inactive_records=_count(records, TimesheetStatus.REJECTED),
            pending_records=_count(records, TimesheetStatus.PENDING),
        )

    async def user_stats(self) -> ReportStats:
        records = await self._users.get_all()
        return ReportStats(
            total_records=len(records),
            active_records=_count(records, UserStatus.ACTIVE),
            inactive_records=_count(records, UserStatus.INACTIVE),
        )

    async def client_stats(self) -> ReportStats:
        records = await self._clients.get_all()
        return ReportStats(
            total_records=len(records),
            active_records=_count(records, ClientStatus.ACTIVE),
            inactive_records=_count(records, ClientStatus.INACTIVE),
        )

    async def project_stats(self) -> ReportStats:
        records = await self._projects.get_all()
        return ReportStats(
            total_records=len(records),
            active_records=_count(records, ProjectStatus.ACTIVE),
            inactive_records=_count(records, ProjectStatus.INACTIVE),
            completed_records=_count(records, ProjectStatus.COMPLETED),
        )

    async def task_stats(self) -> ReportStats:
        records = await self._tasks.get_all()
        return ReportStats(
            total_records=len(records),
            active_records=_count(records, TaskStatus.IN_PROGRESS),
            inactive_records=_count(records, TaskStatus.ON_HOLD),
            completed_records=_count(records, TaskStatus.COMPLETED),
            pending_records=_count(records, TaskStatus.TO_DO),
        )
