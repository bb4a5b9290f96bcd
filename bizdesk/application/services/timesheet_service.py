"""Application service (use case) for timesheets and their approval trail."""

import logging
from datetime import date

from bizdesk.application.interfaces import RecordRepository
from bizdesk.application.schemas.timesheet import (
    DayEntryInput,
    DayEntryUpdate,
    TimesheetCreate,
    TimesheetDecision,
    TimesheetUpdate,
)
from bizdesk.application.services.base_service import RecordService
from bizdesk.application.services.user_service import UserService
from bizdesk.domain.entities import (
    Timesheet,
    TimesheetActionType,
    TimesheetDayEntry,
    TimesheetPeriod,
    TimesheetStats,
    TimesheetStatus,
)
from bizdesk.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


def _to_entry(data: DayEntryInput) -> TimesheetDayEntry:
    fields = data.model_dump(exclude_none=True)
    return TimesheetDayEntry(**fields)


class TimesheetService(RecordService[Timesheet]):
    """Orchestrates timesheet CRUD and approval.

    Every change to a timesheet's hours is mirrored onto the owner's
    ``total_logged_hours`` through the user service, as a second write.
    """

    entity_label = "Timesheet"

    def __init__(self, repository: RecordRepository[Timesheet], users: UserService):
        super().__init__(repository)
        self._users = users

    async def list_for_user(self, user_id: str) -> list[Timesheet]:
        return [t for t in await self._repository.get_all() if t.user_id == user_id]

    async def list_overlapping(self, start: date, end: date) -> list[Timesheet]:
        """Timesheets whose period overlaps ``[start, end]``."""
        return [
            t
            for t in await self._repository.get_all()
            if t.period.start_date <= end and t.period.end_date >= start
        ]

    async def get_stats(self) -> TimesheetStats:
        timesheets = await self._repository.get_all()
        return TimesheetStats(
            total_entries=len(timesheets),
            approved=sum(1 for t in timesheets if t.status == TimesheetStatus.APPROVED),
            pending=sum(1 for t in timesheets if t.status == TimesheetStatus.PENDING),
            rejected=sum(1 for t in timesheets if t.status == TimesheetStatus.REJECTED),
        )

    async def create_record(self, data: TimesheetCreate) -> Timesheet:
        user = await self._users.get_reference(data.user_id)
        approver = await self._users.get_reference(user.reporting_manager.id)

        timesheet = Timesheet(
            user_id=user.id,
            user_name=user.full_name,
            user_avatar=user.avatar,
            approver_id=approver.id,
            approver_name=approver.full_name,
            approver_avatar=approver.avatar,
            department=user.department,
            period=TimesheetPeriod(**data.period.model_dump()),
            status=TimesheetStatus.PENDING,
            entries=[_to_entry(e) for e in data.entries],
        )
        timesheet.recompute_total()
        timesheet.log(TimesheetActionType.SUBMITTED, user.as_person())

        created = await self._repository.create(timesheet)
        logger.info(
            "Created timesheet %s for user %s (%.1f h)", created.id, user.id, created.total_hours
        )
        await self._users.adjust_logged_hours(user.id, created.total_hours)
        return created

    async def update_record(self, timesheet_id: str, data: TimesheetUpdate) -> Timesheet:
        timesheet = await self.get_record(timesheet_id)
        previous_total = timesheet.total_hours

        if data.period is not None:
            timesheet.period = TimesheetPeriod(**data.period.model_dump())
        if data.entries is not None:
            timesheet.entries = [_to_entry(e) for e in data.entries]
            timesheet.recompute_total()
        timesheet.log(TimesheetActionType.UPDATED, timesheet.owner())

        saved = await self._save(timesheet)
        await self._apply_delta(saved.user_id, saved.total_hours - previous_total)
        return saved

    async def update_entry(
        self, timesheet_id: str, entry_id: str, data: DayEntryUpdate
    ) -> Timesheet:
        timesheet = await self.get_record(timesheet_id)
        entry = timesheet.find_entry(entry_id)
        if entry is None:
            raise EntityNotFoundError("TimesheetEntry", entry_id)

        previous_hours = entry.hours
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(entry, key, value)
        timesheet.recompute_total()
        timesheet.log(TimesheetActionType.UPDATED, timesheet.owner())

        saved = await self._save(timesheet)
        await self._apply_delta(saved.user_id, entry.hours - previous_hours)
        return saved

    async def decide(self, data: TimesheetDecision) -> list[Timesheet]:
        """Approve or reject a batch.

        All ids are checked before any timesheet changes, so an unknown id
        leaves the whole batch untouched.
        """
        timesheets = [await self.get_record(tid) for tid in data.timesheet_ids]

        decided: list[Timesheet] = []
        for timesheet in timesheets:
            if data.action == "approve":
                timesheet.mark_approved(data.comment)
            else:
                timesheet.mark_rejected(data.comment)
            decided.append(await self._repository.update(timesheet))

        logger.info("Timesheets %s: %s", data.action, ", ".join(data.timesheet_ids))
        return decided

    async def set_status(self, timesheet_id: str, status: TimesheetStatus) -> Timesheet:
        timesheet = await self.get_record(timesheet_id)
        timesheet.status = TimesheetStatus(status)
        return await self._save(timesheet)

    async def delete_record(self, timesheet_id: str) -> bool:
        timesheet = await self.get_record(timesheet_id)
        deleted = await self._repository.delete(timesheet_id)
        logger.info("Deleted timesheet %s", timesheet_id)
        await self._apply_delta(timesheet.user_id, -timesheet.total_hours)
        return deleted

    async def _apply_delta(self, user_id: str, delta: float) -> None:
        if not delta:
            return
        try:
            await self._users.adjust_logged_hours(user_id, delta)
        except EntityNotFoundError:
            logger.warning("User %s is gone; logged hours not adjusted", user_id)
