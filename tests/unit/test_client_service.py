"""Unit tests for the ClientService."""

import pytest

from bizdesk.application.schemas import ClientCreate, ClientUpdate, ContactInput, QueryParams
from bizdesk.config import Settings
from bizdesk.domain.entities import ClientStatus
from bizdesk.domain.exceptions import EntityNotFoundError
from bizdesk.infrastructure.dependencies import ServiceContainer, build_container
from bizdesk.infrastructure.storage import InMemoryKeyValueStore


@pytest.fixture
def container() -> ServiceContainer:
    return build_container(Settings(storage_backend="memory", _env_file=None), InMemoryKeyValueStore())


@pytest.mark.asyncio
async def test_create_client_fills_defaults(container: ServiceContainer):
    client = await container.clients.create_record(
        ClientCreate(name="NewCo  Ltd", account_manager="Dana Scully", country="Canada")
    )
    assert client.code == "CPL-103"
    assert client.email == "contact@newcoltd.com"
    assert client.manager.name == "Dana Scully"
    assert client.manager.email == "manager@company.com"
    assert client.status is ClientStatus.ACTIVE
    assert client.projects == 0
    assert client.id


@pytest.mark.asyncio
async def test_create_client_without_manager(container: ServiceContainer):
    client = await container.clients.create_record(ClientCreate(name="Solo"))
    assert client.manager.name == "Unassigned"


@pytest.mark.asyncio
async def test_created_client_is_persisted(container: ServiceContainer):
    client = await container.clients.create_record(ClientCreate(name="Persisted"))
    raw = await container.store.get("clients")
    assert client.id in raw
    assert await container.clients.count() == 4


@pytest.mark.asyncio
async def test_get_client_not_found(container: ServiceContainer):
    with pytest.raises(EntityNotFoundError):
        await container.clients.get_record("99")


@pytest.mark.asyncio
async def test_update_client_merges_fields(container: ServiceContainer):
    before = await container.clients.get_record("c1")
    updated = await container.clients.update_record(
        "c1", ClientUpdate(city="Chicago", account_manager="New Manager")
    )
    assert updated.city == "Chicago"
    assert updated.name == "Acme Corporation"
    assert updated.manager.name == "New Manager"
    assert updated.manager.id == before.manager.id
    assert updated.updated_at > before.updated_at


@pytest.mark.asyncio
async def test_update_unknown_client_leaves_collection_unchanged(container: ServiceContainer):
    before = await container.clients.list_records()
    with pytest.raises(EntityNotFoundError):
        await container.clients.update_record("99", ClientUpdate(name="X"))
    after = await container.clients.list_records()
    assert after.data == before.data


@pytest.mark.asyncio
async def test_set_status(container: ServiceContainer):
    client = await container.clients.set_status("c3", ClientStatus.ACTIVE)
    assert client.status is ClientStatus.ACTIVE


@pytest.mark.asyncio
async def test_delete_client(container: ServiceContainer):
    assert await container.clients.delete_record("c3") is True
    with pytest.raises(EntityNotFoundError):
        await container.clients.delete_record("c3")


@pytest.mark.asyncio
async def test_list_clients_by_status(container: ServiceContainer):
    page = await container.clients.list_records(QueryParams(filters={"status": "Inactive"}))
    assert [c.id for c in page.data] == ["c3"]


@pytest.mark.asyncio
async def test_new_primary_contact_clears_the_old_one(container: ServiceContainer):
    contact = await container.clients.add_contact(
        "c1", ContactInput(first_name="Ann", last_name="Lee", is_primary=True)
    )
    client = await container.clients.get_record("c1")
    primaries = [c.id for c in client.contacts if c.is_primary]
    assert primaries == [contact.id]


@pytest.mark.asyncio
async def test_update_contact(container: ServiceContainer):
    contact = await container.clients.update_contact(
        "c1", "ct1", ContactInput(first_name="John", last_name="Doe", designation="CEO", is_primary=True)
    )
    assert contact.designation == "CEO"
    client = await container.clients.get_record("c1")
    assert client.find_contact("ct1").designation == "CEO"


@pytest.mark.asyncio
async def test_unknown_contact_raises(container: ServiceContainer):
    with pytest.raises(EntityNotFoundError):
        await container.clients.update_contact("c1", "nope", ContactInput(first_name="X"))
    with pytest.raises(EntityNotFoundError):
        await container.clients.delete_contact("c1", "nope")


@pytest.mark.asyncio
async def test_delete_contact(container: ServiceContainer):
    await container.clients.delete_contact("c1", "ct1")
    client = await container.clients.get_record("c1")
    assert client.contacts == []
