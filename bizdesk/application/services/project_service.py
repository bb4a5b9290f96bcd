"""Application service (use case) for projects, their teams and activities."""

import logging
import random
from typing import Any

from bizdesk.application.interfaces import RecordRepository
from bizdesk.application.schemas.project import (
    ActivityCreate,
    ActivityUpdate,
    ProjectCreate,
    ProjectUpdate,
)
from bizdesk.application.services.base_service import RecordService
from bizdesk.domain.entities import (
    Activity,
    ActivityStatus,
    Client,
    ClientRef,
    Project,
    ProjectStatus,
    TeamMember,
    User,
    project_duration,
)
from bizdesk.domain.entities.references import unassigned_person
from bizdesk.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


def _client_ref(client: Client) -> ClientRef:
    return ClientRef(id=client.id, code=client.code, name=client.name)


class ProjectService(RecordService[Project]):
    """Orchestrates project CRUD.

    Keeps the owning client's ``projects`` counter in step with creates and
    deletes. The counter write is a second, separate write: if it fails the
    project change still stands and the counter is stale.
    """

    entity_label = "Project"

    def __init__(
        self,
        repository: RecordRepository[Project],
        clients: RecordRepository[Client],
        users: RecordRepository[User],
    ):
        super().__init__(repository)
        self._clients = clients
        self._users = users

    async def create_record(self, data: ProjectCreate) -> Project:
        client = await self._require(self._clients, data.client_id, "Client")
        project_manager = unassigned_person()
        if data.project_manager_id:
            manager = await self._require(self._users, data.project_manager_id, "User")
            project_manager = manager.as_person()

        project = Project(
            name=data.name,
            client=_client_ref(client),
            code=f"PM-{random.randint(0, 999):03d}",
            type=data.type,
            start_date=data.start_date,
            end_date=data.end_date,
            duration=project_duration(data.start_date, data.end_date),
            billing_type=data.billing_type,
            status=ProjectStatus.ACTIVE,
            account_manager=client.manager,
            project_manager=project_manager,
        )
        created = await self._repository.create(project)
        logger.info("Created project %s for client %s", created.code, client.id)

        await self._adjust_client_projects(client.id, +1)
        return created

    async def update_record(self, project_id: str, data: ProjectUpdate) -> Project:
        project = await self.get_record(project_id)

        changes: dict[str, Any] = data.model_dump(exclude_unset=True, exclude_none=True)
        client_id = changes.pop("client_id", None)
        manager_id = changes.pop("project_manager_id", None)

        if client_id is not None and client_id != project.client.id:
            client = await self._require(self._clients, client_id, "Client")
            project.client = _client_ref(client)
            project.account_manager = client.manager
        if manager_id is not None and manager_id != project.project_manager.id:
            manager = await self._require(self._users, manager_id, "User")
            project.project_manager = manager.as_person()

        for key, value in changes.items():
            setattr(project, key, value)
        if "start_date" in changes or "end_date" in changes:
            project.duration = project_duration(project.start_date, project.end_date)

        return await self._save(project)

    async def set_status(self, project_id: str, status: ProjectStatus) -> Project:
        project = await self.get_record(project_id)
        project.status = ProjectStatus(status)
        return await self._save(project)

    async def delete_record(self, project_id: str) -> bool:
        project = await self.get_record(project_id)
        deleted = await self._repository.delete(project_id)
        logger.info("Deleted project %s", project_id)
        await self._adjust_client_projects(project.client.id, -1)
        return deleted

    async def _adjust_client_projects(self, client_id: str, delta: int) -> None:
        client = await self._clients.get_by_id(client_id)
        if client is None:
            logger.warning("Client %s is gone; project counter not updated", client_id)
            return
        client.projects = max(0, client.projects + delta)
        client.touch()
        await self._clients.update(client)

    # ── Team members ────────────────────────────────────────────────

    async def add_team_member(self, project_id: str, user_id: str) -> Project:
        project = await self.get_record(project_id)
        user = await self._require(self._users, user_id, "User")
        if project.has_member(user.id):
            raise DuplicateEntityError("TeamMember", "id", user.id)

        project.assigned_team.append(
            TeamMember(
                id=user.id,
                name=user.full_name,
                email=user.email,
                avatar=user.avatar,
                role=user.role,
            )
        )
        return await self._save(project)

    async def remove_team_member(self, project_id: str, user_id: str) -> Project:
        project = await self.get_record(project_id)
        if not project.has_member(user_id):
            raise EntityNotFoundError("TeamMember", user_id)
        project.assigned_team = [m for m in project.assigned_team if m.id != user_id]
        return await self._save(project)

    # ── Activities ──────────────────────────────────────────────────

    def _get_activity(self, project: Project, activity_id: str) -> Activity:
        activity = project.find_activity(activity_id)
        if activity is None:
            raise EntityNotFoundError("Activity", activity_id)
        return activity

    async def add_activity(self, project_id: str, data: ActivityCreate) -> Activity:
        project = await self.get_record(project_id)
        activity = Activity(
            name=data.name,
            description=data.description,
            project_id=project.id,
        )
        project.activities.append(activity)
        await self._save(project)
        return activity

    async def update_activity(
        self, project_id: str, activity_id: str, data: ActivityUpdate
    ) -> Activity:
        project = await self.get_record(project_id)
        activity = self._get_activity(project, activity_id)
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(activity, key, value)
        activity.touch()
        await self._save(project)
        return activity

    async def set_activity_status(
        self, project_id: str, activity_id: str, status: ActivityStatus
    ) -> Activity:
        project = await self.get_record(project_id)
        activity = self._get_activity(project, activity_id)
        activity.status = ActivityStatus(status)
        activity.touch()
        await self._save(project)
        return activity

    async def delete_activity(self, project_id: str, activity_id: str) -> bool:
        project = await self.get_record(project_id)
        self._get_activity(project, activity_id)
        project.activities = [a for a in project.activities if a.id != activity_id]
        await self._save(project)
        return True
