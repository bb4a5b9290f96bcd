"""Local filesystem key-value store — one JSON file per slot.

Storage layout:
    <data_dir>/<slot_key>.json
"""

import logging
import os
import re
import tempfile
from pathlib import Path

from bizdesk.application.interfaces import KeyValueStore

logger = logging.getLogger(__name__)


def _sanitise(key: str, max_len: int = 80) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", key)[:max_len].strip("_") or "unnamed"


class JsonFileKeyValueStore(KeyValueStore):
    """Infrastructure adapter storing each slot as ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self._data_dir / f"{_sanitise(key)}.json"

    async def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text("utf-8")

    async def set(self, key: str, value: str) -> None:
        """Write the slot atomically: temp file in the same dir, then rename."""
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self._data_dir, prefix=f".{path.stem}_", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote slot '%s' to %s (%d chars)", key, path, len(value))

    async def delete(self, key: str) -> bool:
        path = self._path(key)
        if not path.exists():
            return False
        path.unlink(missing_ok=True)
        logger.info("Deleted slot file: %s", path)
        return True
