"""Concrete ObjectRepository keeping one value in one store slot."""

import copy
import logging
from typing import TypeVar

from pydantic import TypeAdapter

from bizdesk.application.interfaces import ObjectRepository
from bizdesk.infrastructure.records.record_store import PersistResult, RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SlotObjectRepository(ObjectRepository[T]):
    """Single-value counterpart of SlotCollectionRepository.

    The value is re-read on every ``get`` since it is small and rarely used.
    """

    def __init__(
        self,
        store: RecordStore,
        slot_key: str,
        value_type: type[T],
        seed: T,
        *,
        raise_on_persistence_error: bool = False,
    ):
        self.slot_key = slot_key
        self._store = store
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)
        self._seed = seed
        self._raise_on_persistence_error = raise_on_persistence_error
        self.last_persist_result: PersistResult | None = None

    async def get(self) -> T:
        return await self._store.load(self.slot_key, self._seed, self._adapter)

    async def save(self, value: T) -> T:
        result = await self._store.save(self.slot_key, value, self._adapter)
        self.last_persist_result = result
        if result.error is not None and self._raise_on_persistence_error:
            raise result.error
        logger.debug("Saved slot '%s'", self.slot_key)
        return copy.deepcopy(value)
