"""Record store — whole-slot load/save of typed values over a KeyValueStore.

Loading fails soft: a missing, unreadable or malformed slot yields a copy of
the seed value. Saving never raises: failures are logged and reported
through the returned PersistResult so the caller can decide what to do.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from bizdesk.application.interfaces import KeyValueStore
from bizdesk.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PersistResult:
    """Outcome of one slot write."""

    slot_key: str
    error: PersistenceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecordStore:
    """Serializes typed values (usually ``list[Entity]``) into store slots."""

    def __init__(self, storage: KeyValueStore):
        self._storage = storage

    async def load(self, slot_key: str, seed: T, adapter: TypeAdapter[T]) -> T:
        """Return the stored value for ``slot_key`` or a deep copy of ``seed``."""
        try:
            raw = await self._storage.get(slot_key)
        except Exception as exc:
            logger.warning("Could not read slot '%s', using seed data: %s", slot_key, exc)
            return copy.deepcopy(seed)

        if raw is None:
            logger.debug("Slot '%s' is empty, using seed data", slot_key)
            return copy.deepcopy(seed)

        try:
            return adapter.validate_json(raw)
        except (ValidationError, ValueError) as exc:
            logger.warning(
                "Slot '%s' holds malformed data, falling back to seed data (%s)",
                slot_key,
                exc.__class__.__name__,
            )
            return copy.deepcopy(seed)

    async def save(self, slot_key: str, value: Any, adapter: TypeAdapter[Any]) -> PersistResult:
        """Serialize ``value`` and overwrite the slot; never raises."""
        try:
            payload = adapter.dump_json(value).decode("utf-8")
            await self._storage.set(slot_key, payload)
        except Exception as exc:
            error = PersistenceError(slot_key, exc)
            logger.error("Failed to save data to '%s': %s", slot_key, error)
            return PersistResult(slot_key=slot_key, error=error)
        return PersistResult(slot_key=slot_key)
