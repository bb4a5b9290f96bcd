"""Domain entities for clients and their contacts."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4

from .references import PersonRef, unassigned_person


class ClientStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class Contact:
    """A person to talk to at a client. At most one contact is primary."""

    first_name: str
    last_name: str
    designation: str = ""
    email: str = ""
    phone: str = ""
    country_code: str = ""
    is_primary: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class Client:
    """A customer organisation.

    ``projects`` is a denormalized counter maintained by the project service,
    not derived from the projects collection.
    """

    name: str
    code: str = ""
    email: str = ""
    country: str = ""
    industry: str = ""
    projects: int = 0
    manager: PersonRef = field(default_factory=lambda: unassigned_person("manager@company.com"))
    status: ClientStatus = ClientStatus.ACTIVE
    products: str = ""
    onboarding_date: date | None = None
    business_model: str = ""
    tax_id: str | None = None
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    website: str | None = None
    contacts: list[Contact] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Refresh the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def find_contact(self, contact_id: str) -> Contact | None:
        return next((c for c in self.contacts if c.id == contact_id), None)

    def make_primary(self, contact_id: str) -> None:
        """Mark one contact primary and clear the flag on every other one."""
        for contact in self.contacts:
            contact.is_primary = contact.id == contact_id
