"""Application service (use case) for tasks."""

import logging
from typing import Any

from bizdesk.application.interfaces import RecordRepository
from bizdesk.application.schemas.task import TaskCreate, TaskUpdate
from bizdesk.application.services.base_service import RecordService
from bizdesk.domain.entities import (
    ActivityRef,
    PersonRef,
    Project,
    ProjectRef,
    Task,
    TaskStatus,
    User,
)
from bizdesk.domain.exceptions import ReferenceNotFoundError

logger = logging.getLogger(__name__)


class TaskService(RecordService[Task]):
    """Orchestrates task CRUD.

    Tasks are filed against a project activity, so the project and the
    activity are always resolved as a pair.
    """

    entity_label = "Task"

    def __init__(
        self,
        repository: RecordRepository[Task],
        projects: RecordRepository[Project],
        users: RecordRepository[User],
    ):
        super().__init__(repository)
        self._projects = projects
        self._users = users

    async def _resolve_work(
        self, project_id: str, activity_id: str
    ) -> tuple[ProjectRef, ActivityRef]:
        project = await self._require(self._projects, project_id, "Project")
        activity = project.find_activity(activity_id)
        if activity is None:
            raise ReferenceNotFoundError("Activity", activity_id)
        return (
            ProjectRef(id=project.id, code=project.code, name=project.name),
            ActivityRef(id=activity.id, name=activity.name),
        )

    async def _resolve_person(self, user_id: str) -> PersonRef:
        user = await self._require(self._users, user_id, "User")
        return user.as_person()

    async def _resolve_assigner(self, user_id: str | None) -> PersonRef:
        if user_id:
            return await self._resolve_person(user_id)
        users = await self._users.get_all()
        if not users:
            raise ReferenceNotFoundError("User", "<any>")
        return users[0].as_person()

    async def create_record(self, data: TaskCreate) -> Task:
        project, activity = await self._resolve_work(data.project_id, data.activity_id)
        count = await self._repository.count()

        task = Task(
            name=data.name,
            description=data.description,
            project=project,
            activity=activity,
            assigned_to=await self._resolve_person(data.assigned_to_id),
            assigned_by=await self._resolve_assigner(data.assigned_by_id),
            task_reviewer=await self._resolve_person(data.task_reviewer_id),
            code=f"TSK-{count + 10000:05d}",
            priority=data.priority,
            status=TaskStatus.TO_DO,
            activity_type=data.activity_type,
            start_date=data.start_date,
            due_date=data.due_date,
            planned_hours=data.planned_hours,
        )
        created = await self._repository.create(task)
        logger.info("Created task %s under project %s", created.code, project.id)
        return created

    async def update_record(self, task_id: str, data: TaskUpdate) -> Task:
        task = await self.get_record(task_id)

        changes: dict[str, Any] = data.model_dump(exclude_unset=True, exclude_none=True)
        project_id = changes.pop("project_id", None)
        activity_id = changes.pop("activity_id", None)
        assignee_id = changes.pop("assigned_to_id", None)
        reviewer_id = changes.pop("task_reviewer_id", None)

        if project_id is not None and activity_id is not None:
            task.project, task.activity = await self._resolve_work(project_id, activity_id)
        if assignee_id is not None:
            task.assigned_to = await self._resolve_person(assignee_id)
        if reviewer_id is not None:
            task.task_reviewer = await self._resolve_person(reviewer_id)

        for key, value in changes.items():
            setattr(task, key, value)

        return await self._save(task)

    async def set_status(self, task_id: str, status: TaskStatus) -> Task:
        task = await self.get_record(task_id)
        task.status = TaskStatus(status)
        return await self._save(task)

    async def add_comment(self, task_id: str, comment: str) -> Task:
        """Append a comment line to the task's free-text comments."""
        task = await self.get_record(task_id)
        task.comments = f"{task.comments}\n{comment}" if task.comments else comment
        return await self._save(task)
