"""Pydantic DTOs for tasks."""

from datetime import date

from pydantic import BaseModel, Field

from bizdesk.domain.entities import ActivityType, TaskPriority


class TaskCreate(BaseModel):
    """Schema for creating a task.

    ``project_id``/``activity_id`` must name an existing project and one of
    its activities; the user ids must name existing users. When
    ``assigned_by_id`` is omitted the first user in the directory is used.
    """

    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    project_id: str
    activity_id: str
    assigned_to_id: str
    task_reviewer_id: str
    assigned_by_id: str | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    activity_type: ActivityType = ActivityType.FEATURE
    start_date: date | None = None
    due_date: date | None = None
    planned_hours: float = Field(0.0, ge=0)


class TaskUpdate(BaseModel):
    """Schema for updating a task.

    Project and activity are only re-resolved when both ids are given.
    """

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    project_id: str | None = None
    activity_id: str | None = None
    assigned_to_id: str | None = None
    task_reviewer_id: str | None = None
    priority: TaskPriority | None = None
    activity_type: ActivityType | None = None
    start_date: date | None = None
    due_date: date | None = None
    planned_hours: float | None = Field(None, ge=0)
