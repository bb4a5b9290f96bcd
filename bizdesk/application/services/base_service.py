"""Shared CRUD surface for the per-entity application services."""

import logging
from typing import Generic, TypeVar

from bizdesk.application.interfaces import RecordRepository
from bizdesk.application.schemas.query import QueryParams
from bizdesk.domain.entities import Page
from bizdesk.domain.exceptions import EntityNotFoundError, ReferenceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class RecordService(Generic[T]):
    """Listing, lookup and deletion for one collection.

    Subclasses add creation defaults, reference resolution and the
    entity-specific mutators. Depends on the repository port (DI).
    """

    entity_label = "Record"

    def __init__(self, repository: RecordRepository[T]):
        self._repository = repository

    async def list_records(self, params: QueryParams | None = None) -> Page[T]:
        return await self._repository.query(params)

    async def get_record(self, record_id: str) -> T:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError(self.entity_label, record_id)
        return record

    async def get_reference(self, record_id: str) -> T:
        """Like get_record, but a miss is reported as an unresolvable reference."""
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise ReferenceNotFoundError(self.entity_label, record_id)
        return record

    async def delete_record(self, record_id: str) -> bool:
        exists = await self._repository.get_by_id(record_id)
        if exists is None:
            raise EntityNotFoundError(self.entity_label, record_id)
        deleted = await self._repository.delete(record_id)
        logger.info("Deleted %s %s", self.entity_label, record_id)
        return deleted

    async def count(self) -> int:
        return await self._repository.count()

    async def reload(self) -> None:
        await self._repository.reload()

    async def _save(self, record: T) -> T:
        """Re-stamp ``updated_at`` and write the record back."""
        record.touch()
        return await self._repository.update(record)

    @staticmethod
    async def _require(repository: RecordRepository[R], record_id: str, label: str) -> R:
        """Resolve a cross-reference or raise ReferenceNotFoundError."""
        record = await repository.get_by_id(record_id)
        if record is None:
            raise ReferenceNotFoundError(label, record_id)
        return record
