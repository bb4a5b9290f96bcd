"""Pydantic DTOs for projects and project activities."""

from datetime import date

from pydantic import BaseModel, Field

from bizdesk.domain.entities import BillingType, ProjectType


class ProjectCreate(BaseModel):
    """Schema for creating a project. ``client_id`` must name an existing client."""

    name: str = Field(..., min_length=1, max_length=200)
    client_id: str
    type: ProjectType = ProjectType.DEVELOPMENT
    start_date: date | None = None
    end_date: date | None = None
    billing_type: BillingType = BillingType.BILLABLE
    project_manager_id: str | None = None


class ProjectUpdate(BaseModel):
    """Schema for updating a project — omitted fields are kept."""

    name: str | None = Field(None, min_length=1, max_length=200)
    client_id: str | None = None
    type: ProjectType | None = None
    start_date: date | None = None
    end_date: date | None = None
    billing_type: BillingType | None = None
    project_manager_id: str | None = None


class ActivityCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""


class ActivityUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    description: str | None = None
