"""Unit tests for the SettingsService (general settings and roles)."""

import pytest
from pydantic import ValidationError

from bizdesk.application.schemas import (
    ModulePermissionsSchema,
    PermissionSchema,
    RoleInput,
    SettingsUpdate,
)
from bizdesk.config import Settings
from bizdesk.domain.exceptions import EntityNotFoundError, ReferenceNotFoundError
from bizdesk.infrastructure.dependencies import ServiceContainer, build_container
from bizdesk.infrastructure.storage import InMemoryKeyValueStore


@pytest.fixture
def container() -> ServiceContainer:
    return build_container(Settings(storage_backend="memory", _env_file=None), InMemoryKeyValueStore())


@pytest.mark.asyncio
async def test_general_settings_default_to_seed(container: ServiceContainer):
    general = await container.settings_service.get_general_settings()
    assert general.daily_working_hours == 8
    assert general.weekly_working_days == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


@pytest.mark.asyncio
async def test_update_general_settings_persists(container: ServiceContainer):
    await container.settings_service.update_general_settings(
        SettingsUpdate(daily_working_hours=7.5, weekly_working_days=["Monday", "Saturday"])
    )
    general = await container.settings_service.get_general_settings()
    assert general.daily_working_hours == 7.5
    assert general.weekly_working_days == ["Monday", "Saturday"]
    assert "generalSettings" in container.store.keys()


def test_unknown_week_day_is_rejected():
    with pytest.raises(ValidationError):
        SettingsUpdate(daily_working_hours=8, weekly_working_days=["Funday"])


@pytest.mark.asyncio
async def test_seed_roles(container: ServiceContainer):
    page = await container.settings_service.list_records()
    assert [r.name for r in page.data] == [
        "Project Manager",
        "Employee",
        "HR",
        "Account & Finance",
        "Account Manager",
    ]
    assert await container.settings_service.get_user_count("2") == 97


@pytest.mark.asyncio
async def test_create_update_delete_role(container: ServiceContainer):
    permissions = ModulePermissionsSchema(report=PermissionSchema(view=True))
    role = await container.settings_service.create_record(
        RoleInput(name="Auditor", permissions=permissions)
    )
    assert role.user_count == 0
    assert role.allows("report", "view")
    assert not role.allows("report", "delete")

    role = await container.settings_service.update_record(role.id, RoleInput(name="Lead Auditor"))
    assert role.name == "Lead Auditor"
    assert not role.allows("report", "view")

    await container.settings_service.delete_record(role.id)
    with pytest.raises(EntityNotFoundError):
        await container.settings_service.get_record(role.id)


@pytest.mark.asyncio
async def test_assign_and_unassign_role(container: ServiceContainer):
    role = await container.settings_service.assign_role("3")
    assert role.user_count == 4

    for _ in range(10):
        role = await container.settings_service.unassign_role("3")
    assert role.user_count == 0


@pytest.mark.asyncio
async def test_unknown_role(container: ServiceContainer):
    with pytest.raises(EntityNotFoundError):
        await container.settings_service.assign_role("nope")


@pytest.mark.asyncio
async def test_has_permission_reads_the_users_role(container: ServiceContainer):
    service = container.settings_service
    # u2 is a Project Manager
    assert await service.has_permission("u2", "task", "edit") is True
    assert await service.has_permission("u2", "project", "view") is False
    assert await service.has_permission("u2", "invoices", "view") is False
    # u5 is HR
    assert await service.has_permission("u5", "report", "edit") is True


@pytest.mark.asyncio
async def test_has_permission_for_unknown_user(container: ServiceContainer):
    with pytest.raises(ReferenceNotFoundError):
        await container.settings_service.has_permission("ghost", "task", "view")
