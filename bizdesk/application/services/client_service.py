"""Application service (use case) for clients and their contacts."""

import logging
import re
from typing import Any

from bizdesk.application.schemas.client import ClientCreate, ClientUpdate, ContactInput
from bizdesk.application.services.base_service import RecordService
from bizdesk.domain.entities import Client, ClientStatus, Contact
from bizdesk.domain.entities.references import PersonRef, unassigned_person
from bizdesk.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

_MANAGER_EMAIL = "manager@company.com"


def _default_email(name: str) -> str:
    compact = re.sub(r"\s+", "", name.lower())
    return f"contact@{compact}.com"


def _manager_snapshot(name: str | None) -> PersonRef:
    if not name:
        return unassigned_person(_MANAGER_EMAIL)
    return PersonRef(id="1", name=name, email=_MANAGER_EMAIL)


class ClientService(RecordService[Client]):
    """Orchestrates client CRUD and the contact sub-collection."""

    entity_label = "Client"

    async def create_record(self, data: ClientCreate) -> Client:
        count = await self._repository.count()
        client = Client(
            name=data.name,
            code=f"CPL-{count + 100:03d}",
            email=_default_email(data.name),
            country=data.country,
            industry=data.industry,
            manager=_manager_snapshot(data.account_manager),
            status=ClientStatus.ACTIVE,
            products=data.products,
            onboarding_date=data.onboarding_date,
            business_model=data.business_model,
            tax_id=data.tax_id,
            address=data.address,
            city=data.city,
            state=data.state,
            zip_code=data.zip_code,
            website=data.website,
        )
        created = await self._repository.create(client)
        logger.info("Created client %s (%s)", created.code, created.id)
        return created

    async def update_record(self, client_id: str, data: ClientUpdate) -> Client:
        client = await self.get_record(client_id)

        changes: dict[str, Any] = data.model_dump(exclude_unset=True, exclude_none=True)
        manager_name = changes.pop("account_manager", None)
        for key, value in changes.items():
            setattr(client, key, value)
        if manager_name is not None:
            client.manager.name = manager_name

        return await self._save(client)

    async def set_status(self, client_id: str, status: ClientStatus) -> Client:
        client = await self.get_record(client_id)
        client.status = ClientStatus(status)
        return await self._save(client)

    # ── Contacts ────────────────────────────────────────────────────

    async def add_contact(self, client_id: str, data: ContactInput) -> Contact:
        client = await self.get_record(client_id)
        contact = Contact(**data.model_dump())
        client.contacts.append(contact)
        if contact.is_primary:
            client.make_primary(contact.id)
        await self._save(client)
        return contact

    async def update_contact(
        self, client_id: str, contact_id: str, data: ContactInput
    ) -> Contact:
        client = await self.get_record(client_id)
        contact = client.find_contact(contact_id)
        if contact is None:
            raise EntityNotFoundError("Contact", contact_id)

        for key, value in data.model_dump().items():
            setattr(contact, key, value)
        if contact.is_primary:
            client.make_primary(contact.id)
        await self._save(client)
        return contact

    async def delete_contact(self, client_id: str, contact_id: str) -> bool:
        client = await self.get_record(client_id)
        if client.find_contact(contact_id) is None:
            raise EntityNotFoundError("Contact", contact_id)
        client.contacts = [c for c in client.contacts if c.id != contact_id]
        await self._save(client)
        return True
