"""Abstract key-value store interface (port) backing every collection slot."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Port for durable slot storage — implemented in the infrastructure layer.

    Values are opaque serialized strings; one key holds one whole collection.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if the slot was never written."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Overwrite the slot with a new value."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove a slot. Returns True if it existed."""
        ...
