"""Abstract repository interface (port) for a slot holding one object."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class ObjectRepository(ABC, Generic[T]):
    """Port for a single persisted value, such as workspace settings."""

    slot_key: str

    @abstractmethod
    async def get(self) -> T:
        """Return the stored value, or the seed value when nothing is stored."""
        ...

    @abstractmethod
    async def save(self, value: T) -> T:
        """Overwrite the stored value."""
        ...
