"""Unit tests for the ReportService and date-preset resolution."""

from datetime import date

import pytest

from bizdesk.application.schemas import QueryParams, ReportFilter
from bizdesk.application.services import ReportService, resolve_date_range
from bizdesk.domain.entities import Client, Project, Task, Timesheet, User
from bizdesk.infrastructure.records import RecordStore, SlotCollectionRepository
from bizdesk.infrastructure.seed.loader import load_seed
from bizdesk.infrastructure.storage import InMemoryKeyValueStore

TODAY = date(2024, 3, 15)


def _repository(store: RecordStore, slot_key: str, record_type: type) -> SlotCollectionRepository:
    return SlotCollectionRepository(store, slot_key, record_type, load_seed(slot_key, record_type))


@pytest.fixture
def reports() -> ReportService:
    store = RecordStore(InMemoryKeyValueStore())
    return ReportService(
        timesheets=_repository(store, "timesheets", Timesheet),
        users=_repository(store, "users", User),
        clients=_repository(store, "clients", Client),
        projects=_repository(store, "projects", Project),
        tasks=_repository(store, "tasks", Task),
        today=lambda: TODAY,
    )


# ── Date presets ────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "preset, start, end",
    [
        ("last7days", "2024-03-08", "2024-03-15"),
        ("thisMonth", "2024-03-01", "2024-03-31"),
        ("lastMonth", "2024-02-01", "2024-02-29"),
        ("yearToDate", "2024-01-01", "2024-03-15"),
    ],
)
def test_presets(preset, start, end):
    date_range = resolve_date_range(ReportFilter(date_range=preset), TODAY)
    assert date_range.from_ == start
    assert date_range.to.startswith(end)


def test_last_month_across_year_boundary():
    date_range = resolve_date_range(ReportFilter(date_range="lastMonth"), date(2024, 1, 10))
    assert date_range.from_ == "2023-12-01"
    assert date_range.to.startswith("2023-12-31")


def test_no_filtering_presets():
    assert resolve_date_range(None, TODAY) is None
    assert resolve_date_range(ReportFilter(), TODAY) is None
    assert resolve_date_range(ReportFilter(date_range="custom"), TODAY) is None


def test_custom_preset_widens_bare_end_date():
    date_range = resolve_date_range(
        ReportFilter(
            date_range="custom", custom_start_date="2024-03-01", custom_end_date="2024-03-08"
        ),
        TODAY,
    )
    assert date_range.from_ == "2024-03-01"
    assert date_range.to.startswith("2024-03-08T23:59:59")


# ── Listings ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_timesheet_report_includes_whole_end_day(reports: ReportService):
    page = await reports.timesheet_report(
        ReportFilter(date_range="custom", custom_start_date="2024-03-08", custom_end_date="2024-03-08")
    )
    assert [t.id for t in page.data] == ["ts1", "ts2"]


@pytest.mark.asyncio
async def test_project_report_uses_start_date(reports: ReportService):
    page = await reports.project_report(ReportFilter(date_range="thisMonth"))
    assert [p.id for p in page.data] == ["p2"]


@pytest.mark.asyncio
async def test_client_report_uses_onboarding_date(reports: ReportService):
    page = await reports.client_report(ReportFilter(date_range="yearToDate"))
    assert [c.id for c in page.data] == ["c2"]


@pytest.mark.asyncio
async def test_task_report_uses_due_date(reports: ReportService):
    page = await reports.task_report(ReportFilter(date_range="last7days"))
    assert [t.id for t in page.data] == ["t2"]


@pytest.mark.asyncio
async def test_user_report_ignores_date_presets(reports: ReportService):
    page = await reports.user_report(ReportFilter(date_range="last7days"))
    assert page.total == 5


@pytest.mark.asyncio
async def test_report_combines_preset_with_query(reports: ReportService):
    page = await reports.task_report(
        ReportFilter(date_range="thisMonth"),
        QueryParams(sort_by="due_date", sort_direction="desc", page_size=1),
    )
    assert page.total == 2
    assert [t.id for t in page.data] == ["t3"]


# ── Stats ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_stats(reports: ReportService):
    timesheets = await reports.timesheet_stats()
    assert (timesheets.total_records, timesheets.active_records, timesheets.pending_records) == (2, 1, 1)

    users = await reports.user_stats()
    assert (users.total_records, users.active_records, users.inactive_records) == (5, 4, 1)
    assert users.completed_records is None

    clients = await reports.client_stats()
    assert (clients.active_records, clients.inactive_records) == (2, 1)

    projects = await reports.project_stats()
    assert (projects.total_records, projects.active_records, projects.completed_records) == (2, 1, 0)

    tasks = await reports.task_stats()
    assert (
        tasks.active_records,
        tasks.inactive_records,
        tasks.completed_records,
        tasks.pending_records,
    ) == (1, 1, 0, 1)
