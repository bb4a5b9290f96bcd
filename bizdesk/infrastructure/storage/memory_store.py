"""In-memory key-value store — used by tests and the ``memory`` storage backend."""

import logging

from bizdesk.application.interfaces import KeyValueStore
from bizdesk.domain.exceptions import StorageQuotaExceededError

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store with an optional total byte quota.

    A write that would push the total UTF-8 size of all values past
    ``quota_bytes`` raises StorageQuotaExceededError and leaves the slot as it was.
    """

    def __init__(self, initial: dict[str, str] | None = None, quota_bytes: int | None = None):
        self._data: dict[str, str] = dict(initial or {})
        self._quota = quota_bytes

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self._quota is not None:
            others = sum(len(v.encode("utf-8")) for k, v in self._data.items() if k != key)
            required = others + len(value.encode("utf-8"))
            if required > self._quota:
                raise StorageQuotaExceededError(key, required, self._quota)
        self._data[key] = value
        logger.debug("Stored slot '%s' (%d chars)", key, len(value))

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return list(self._data)
