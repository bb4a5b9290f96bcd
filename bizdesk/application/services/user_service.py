"""Application service (use case) for users and their project assignments."""

import logging
import random
from typing import Any

from bizdesk.application.interfaces import RecordRepository
from bizdesk.application.schemas.user import AssignProjects, UserCreate, UserUpdate
from bizdesk.application.services.base_service import RecordService
from bizdesk.domain.entities import AssignedProject, Project, User, UserStatus
from bizdesk.domain.entities.references import unassigned_person

logger = logging.getLogger(__name__)


def _random_avatar() -> str:
    return f"/rectangle-3-{random.randint(1, 10)}.png"


class UserService(RecordService[User]):
    """Orchestrates user CRUD, project assignment and logged-hours bookkeeping."""

    entity_label = "User"

    def __init__(
        self,
        repository: RecordRepository[User],
        projects: RecordRepository[Project],
    ):
        super().__init__(repository)
        self._projects = projects

    async def create_record(self, data: UserCreate) -> User:
        reporting_manager = unassigned_person()
        if data.reporting_manager_id:
            manager = await self._require(self._repository, data.reporting_manager_id, "User")
            reporting_manager = manager.as_person()

        count = await self._repository.count()
        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            code=f"EMP-{count + 10000:05d}",
            role=data.role,
            department=data.department,
            reporting_manager=reporting_manager,
            status=UserStatus.ACTIVE,
            avatar=_random_avatar(),
        )
        created = await self._repository.create(user)
        logger.info("Created user %s (%s)", created.code, created.id)
        return created

    async def update_record(self, user_id: str, data: UserUpdate) -> User:
        user = await self.get_record(user_id)

        changes: dict[str, Any] = data.model_dump(exclude_unset=True, exclude_none=True)
        manager_id = changes.pop("reporting_manager_id", None)
        if manager_id is not None and manager_id != user.reporting_manager.id:
            manager = await self._require(self._repository, manager_id, "User")
            user.reporting_manager = manager.as_person()

        for key, value in changes.items():
            setattr(user, key, value)

        return await self._save(user)

    async def set_status(self, user_id: str, status: UserStatus) -> User:
        user = await self.get_record(user_id)
        user.status = UserStatus(status)
        return await self._save(user)

    async def assign_projects(self, user_id: str, data: AssignProjects) -> User:
        """Add project snapshots to the user; already-assigned projects are skipped.

        Every project id is resolved before the user is touched.
        """
        user = await self.get_record(user_id)
        projects = [
            await self._require(self._projects, project_id, "Project")
            for project_id in data.project_ids
        ]

        assigned = {p.id for p in user.assigned_projects}
        for project in projects:
            if project.id in assigned:
                continue
            assigned.add(project.id)
            user.assigned_projects.append(
                AssignedProject(
                    id=project.id,
                    code=project.code,
                    name=project.name,
                    client=project.client,
                    type=project.type.value,
                    billing_type=project.billing_type.value,
                    start_date=project.start_date,
                    end_date=project.end_date,
                )
            )
        return await self._save(user)

    async def remove_project(self, user_id: str, project_id: str) -> User:
        user = await self.get_record(user_id)
        user.assigned_projects = [p for p in user.assigned_projects if p.id != project_id]
        return await self._save(user)

    async def adjust_logged_hours(self, user_id: str, hours: float) -> User:
        """Add ``hours`` (negative to subtract) to the user's logged total."""
        user = await self.get_record(user_id)
        user.total_logged_hours = max(0.0, user.total_logged_hours + hours)
        return await self._save(user)
