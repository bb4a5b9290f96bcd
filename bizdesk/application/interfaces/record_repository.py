"""Abstract repository interface (port) for one persisted collection of records."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from bizdesk.application.schemas.query import QueryParams
from bizdesk.domain.entities import Page

T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """Port for whole-collection persistence of one entity kind.

    Records handed out are copies: mutating one has no effect until it is
    passed back through ``update``.
    """

    slot_key: str

    @abstractmethod
    async def get_by_id(self, record_id: str) -> T | None:
        """Retrieve a single record by its id."""
        ...

    @abstractmethod
    async def query(self, params: QueryParams | None = None) -> Page[T]:
        """Retrieve a searched, filtered, sorted, paginated page of records."""
        ...

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Retrieve every record in stored order."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def create(self, record: T) -> T:
        """Append a new record and persist the collection."""
        ...

    @abstractmethod
    async def update(self, record: T) -> T:
        """Replace the record with the same id and persist the collection."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def reload(self) -> None:
        """Drop the cached collection so the next call re-reads the store."""
        ...
