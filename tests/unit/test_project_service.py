"""Unit tests for the ProjectService."""

import json
from datetime import date

import pytest

from bizdesk.application.schemas import (
    ActivityCreate,
    ActivityUpdate,
    ClientUpdate,
    ProjectCreate,
    ProjectUpdate,
)
from bizdesk.config import Settings
from bizdesk.domain.entities import ActivityStatus, ProjectStatus, ProjectType
from bizdesk.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ReferenceNotFoundError,
)
from bizdesk.infrastructure.dependencies import ServiceContainer, build_container
from bizdesk.infrastructure.storage import InMemoryKeyValueStore


@pytest.fixture
def container() -> ServiceContainer:
    return build_container(Settings(storage_backend="memory", _env_file=None), InMemoryKeyValueStore())


def _create(**overrides) -> ProjectCreate:
    fields = {
        "name": "Data Platform",
        "client_id": "c2",
        "type": ProjectType.CONSULTING,
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 3, 31),
        "project_manager_id": "u2",
    }
    fields.update(overrides)
    return ProjectCreate(**fields)


@pytest.mark.asyncio
async def test_create_project_resolves_references(container: ServiceContainer):
    project = await container.projects.create_record(_create())

    assert project.client.id == "c2"
    assert project.client.name == "Globex Industries"
    assert project.project_manager.name == "Michael Chen"
    assert project.account_manager.name == "Sarah Johnson"
    assert project.duration == "3 Months"
    assert project.status is ProjectStatus.ACTIVE
    assert project.code.startswith("PM-") and len(project.code) == 6


@pytest.mark.asyncio
async def test_create_project_increments_client_counter(container: ServiceContainer):
    await container.projects.create_record(_create())
    client = await container.clients.get_record("c2")
    assert client.projects == 2


@pytest.mark.asyncio
async def test_create_project_for_unknown_client(container: ServiceContainer):
    with pytest.raises(ReferenceNotFoundError) as exc_info:
        await container.projects.create_record(_create(client_id="nope"))
    assert isinstance(exc_info.value, EntityNotFoundError)
    assert exc_info.value.entity_type == "Client"
    assert await container.projects.count() == 2


@pytest.mark.asyncio
async def test_create_project_with_unknown_manager(container: ServiceContainer):
    with pytest.raises(ReferenceNotFoundError):
        await container.projects.create_record(_create(project_manager_id="ghost"))


@pytest.mark.asyncio
async def test_create_project_without_manager(container: ServiceContainer):
    project = await container.projects.create_record(_create(project_manager_id=None))
    assert project.project_manager.name == "Unassigned"


@pytest.mark.asyncio
async def test_delete_project_decrements_client_counter(container: ServiceContainer):
    await container.projects.delete_record("p1")
    assert (await container.clients.get_record("c1")).projects == 0
    with pytest.raises(EntityNotFoundError):
        await container.projects.get_record("p1")


@pytest.mark.asyncio
async def test_client_counter_never_goes_negative(container: ServiceContainer):
    project = await container.projects.create_record(_create(client_id="c3"))
    # Another writer leaves a stale counter of 0 before the delete
    clients = json.loads(await container.store.get("clients"))
    for client in clients:
        if client["id"] == "c3":
            client["projects"] = 0
    await container.store.set("clients", json.dumps(clients))
    await container.reload()

    await container.projects.delete_record(project.id)
    assert (await container.clients.get_record("c3")).projects == 0


@pytest.mark.asyncio
async def test_delete_project_when_client_is_gone(container: ServiceContainer):
    await container.clients.delete_record("c2")
    assert await container.projects.delete_record("p2") is True


@pytest.mark.asyncio
async def test_delete_unknown_project(container: ServiceContainer):
    with pytest.raises(EntityNotFoundError):
        await container.projects.delete_record("nope")


@pytest.mark.asyncio
async def test_update_reassigns_client_and_recomputes_duration(container: ServiceContainer):
    project = await container.projects.update_record(
        "p2", ProjectUpdate(client_id="c1", end_date=date(2024, 3, 31))
    )
    assert project.client.name == "Acme Corporation"
    assert project.duration == "1 Month"


@pytest.mark.asyncio
async def test_update_with_unknown_client_changes_nothing(container: ServiceContainer):
    with pytest.raises(ReferenceNotFoundError):
        await container.projects.update_record("p1", ProjectUpdate(client_id="nope", name="X"))
    assert (await container.projects.get_record("p1")).name == "Customer Portal Revamp"


@pytest.mark.asyncio
async def test_client_rename_does_not_refresh_project_snapshot(container: ServiceContainer):
    await container.clients.update_record("c1", ClientUpdate(name="Acme Holdings"))
    project = await container.projects.get_record("p1")
    assert project.client.name == "Acme Corporation"


@pytest.mark.asyncio
async def test_set_status_allows_any_transition(container: ServiceContainer):
    await container.projects.set_status("p1", ProjectStatus.COMPLETED)
    project = await container.projects.set_status("p1", ProjectStatus.ACTIVE)
    assert project.status is ProjectStatus.ACTIVE


@pytest.mark.asyncio
async def test_add_and_remove_team_member(container: ServiceContainer):
    project = await container.projects.add_team_member("p1", "u4")
    assert project.has_member("u4")
    member = next(m for m in project.assigned_team if m.id == "u4")
    assert member.name == "David Okafor"

    project = await container.projects.remove_team_member("p1", "u4")
    assert not project.has_member("u4")


@pytest.mark.asyncio
async def test_duplicate_team_member(container: ServiceContainer):
    with pytest.raises(DuplicateEntityError):
        await container.projects.add_team_member("p1", "u3")


@pytest.mark.asyncio
async def test_team_member_errors(container: ServiceContainer):
    with pytest.raises(ReferenceNotFoundError):
        await container.projects.add_team_member("p1", "ghost")
    with pytest.raises(EntityNotFoundError):
        await container.projects.remove_team_member("p1", "u5")


@pytest.mark.asyncio
async def test_activity_lifecycle(container: ServiceContainer):
    activity = await container.projects.add_activity(
        "p2", ActivityCreate(name="Model Training", description="First pass")
    )
    assert activity.project_id == "p2"
    assert activity.status is ActivityStatus.PENDING

    updated = await container.projects.update_activity(
        "p2", activity.id, ActivityUpdate(description="Second pass")
    )
    assert updated.name == "Model Training"
    assert updated.description == "Second pass"

    done = await container.projects.set_activity_status("p2", activity.id, ActivityStatus.COMPLETED)
    assert done.status is ActivityStatus.COMPLETED

    await container.projects.delete_activity("p2", activity.id)
    project = await container.projects.get_record("p2")
    assert project.find_activity(activity.id) is None


@pytest.mark.asyncio
async def test_unknown_activity(container: ServiceContainer):
    with pytest.raises(EntityNotFoundError):
        await container.projects.set_activity_status("p1", "nope", ActivityStatus.COMPLETED)
