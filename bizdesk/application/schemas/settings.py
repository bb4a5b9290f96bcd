"""Pydantic DTOs for general settings and roles."""

from pydantic import BaseModel, Field, field_validator

from bizdesk.domain.entities.settings import WEEK_DAYS


class SettingsUpdate(BaseModel):
    daily_working_hours: float = Field(..., gt=0, le=24)
    weekly_working_days: list[str]

    @field_validator("weekly_working_days")
    @classmethod
    def _known_days(cls, days: list[str]) -> list[str]:
        unknown = [d for d in days if d not in WEEK_DAYS]
        if unknown:
            raise ValueError(f"Unknown week days: {', '.join(unknown)}")
        return days


class PermissionSchema(BaseModel):
    view: bool = False
    create: bool = False
    edit: bool = False
    delete: bool = False


class ModulePermissionsSchema(BaseModel):
    timesheet: PermissionSchema = Field(default_factory=PermissionSchema)
    task: PermissionSchema = Field(default_factory=PermissionSchema)
    project: PermissionSchema = Field(default_factory=PermissionSchema)
    client: PermissionSchema = Field(default_factory=PermissionSchema)
    report: PermissionSchema = Field(default_factory=PermissionSchema)


class RoleInput(BaseModel):
    """Schema for creating or replacing a role."""

    name: str = Field(..., min_length=1, max_length=100)
    permissions: ModulePermissionsSchema = Field(default_factory=ModulePermissionsSchema)
