"""Denormalized reference snapshots embedded in other entities.

A snapshot copies the referenced entity's display fields at write time.
It is NOT refreshed when the referenced entity later changes.
"""

from dataclasses import dataclass

DEFAULT_AVATAR = "/rectangle-3-1.png"


@dataclass
class PersonRef:
    """Display snapshot of a user (manager, assignee, reviewer…)."""

    id: str
    name: str
    email: str = ""
    avatar: str = DEFAULT_AVATAR


@dataclass
class ClientRef:
    """Display snapshot of a client."""

    id: str
    code: str
    name: str


@dataclass
class ProjectRef:
    """Display snapshot of a project."""

    id: str
    code: str
    name: str


@dataclass
class ActivityRef:
    """Display snapshot of a project activity."""

    id: str
    name: str


def unassigned_person(email: str = "unassigned@company.com") -> PersonRef:
    """Placeholder snapshot used when no person was chosen."""
    return PersonRef(id="1", name="Unassigned", email=email, avatar=DEFAULT_AVATAR)
