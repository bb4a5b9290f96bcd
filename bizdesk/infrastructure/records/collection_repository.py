"""Concrete RecordRepository keeping one entity collection in one store slot."""

import asyncio
import copy
import logging
from collections.abc import Sequence
from typing import TypeVar

from pydantic import TypeAdapter

from bizdesk.application.interfaces import RecordRepository
from bizdesk.application.schemas.query import QueryParams
from bizdesk.application.services.query_engine import run_query
from bizdesk.domain.entities import Page
from bizdesk.infrastructure.records.record_store import PersistResult, RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SlotCollectionRepository(RecordRepository[T]):
    """Implements the RecordRepository port on top of a RecordStore slot.

    The collection is loaded lazily on first access and cached; every
    mutation rewrites the whole slot (last writer wins). Records must carry
    a string ``id`` attribute.
    """

    def __init__(
        self,
        store: RecordStore,
        slot_key: str,
        record_type: type[T],
        seed: Sequence[T] = (),
        *,
        latency: float = 0.0,
        raise_on_persistence_error: bool = False,
    ):
        self.slot_key = slot_key
        self._store = store
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[record_type])
        self._seed: list[T] = list(seed)
        self._latency = latency
        self._raise_on_persistence_error = raise_on_persistence_error
        self._records: list[T] | None = None
        self._load_lock = asyncio.Lock()
        # Held across mutate-and-persist so slot writes land in call order
        self._write_lock = asyncio.Lock()
        self.last_persist_result: PersistResult | None = None

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    async def _collection(self) -> list[T]:
        if self._records is not None:
            return self._records
        # Concurrent first callers must share one loaded list
        async with self._load_lock:
            if self._records is None:
                self._records = await self._store.load(self.slot_key, self._seed, self._adapter)
                logger.debug("Loaded %d records from slot '%s'", len(self._records), self.slot_key)
        return self._records

    async def _persist(self, previous: list[T]) -> None:
        """Write the cached collection.

        In strict mode a failed write restores ``previous`` and raises;
        otherwise the failure is only logged and the cache keeps the change.
        """
        result = await self._store.save(self.slot_key, self._records or [], self._adapter)
        self.last_persist_result = result
        if result.error is not None and self._raise_on_persistence_error:
            self._records = previous
            raise result.error

    def _index_of(self, records: list[T], record_id: str) -> int:
        for index, record in enumerate(records):
            if getattr(record, "id") == record_id:
                return index
        return -1

    async def get_by_id(self, record_id: str) -> T | None:
        await self._simulate_latency()
        records = await self._collection()
        index = self._index_of(records, record_id)
        return copy.deepcopy(records[index]) if index >= 0 else None

    async def query(self, params: QueryParams | None = None) -> Page[T]:
        await self._simulate_latency()
        records = await self._collection()
        page = run_query(records, params)
        page.data = copy.deepcopy(page.data)
        return page

    async def get_all(self) -> list[T]:
        await self._simulate_latency()
        return copy.deepcopy(await self._collection())

    async def count(self) -> int:
        return len(await self._collection())

    async def create(self, record: T) -> T:
        await self._simulate_latency()
        async with self._write_lock:
            records = await self._collection()
            previous = list(records)
            records.append(copy.deepcopy(record))
            await self._persist(previous)
        return record

    async def update(self, record: T) -> T:
        await self._simulate_latency()
        record_id = getattr(record, "id")
        async with self._write_lock:
            records = await self._collection()
            index = self._index_of(records, record_id)
            if index < 0:
                raise ValueError(f"Record {record_id} not found in slot '{self.slot_key}'")
            previous = list(records)
            records[index] = copy.deepcopy(record)
            await self._persist(previous)
        return record

    async def delete(self, record_id: str) -> bool:
        await self._simulate_latency()
        async with self._write_lock:
            records = await self._collection()
            index = self._index_of(records, record_id)
            if index < 0:
                return False
            previous = list(records)
            del records[index]
            await self._persist(previous)
        return True

    async def reload(self) -> None:
        self._records = None
