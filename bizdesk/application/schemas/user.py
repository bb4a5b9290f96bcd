"""Pydantic DTOs for users."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field("", max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    role: str = ""
    department: str = ""
    reporting_manager_id: str | None = None


class UserUpdate(BaseModel):
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=255)
    role: str | None = None
    department: str | None = None
    reporting_manager_id: str | None = None


class AssignProjects(BaseModel):
    project_ids: list[str] = Field(..., min_length=1)
