"""Built-in seed datasets, shipped as YAML next to this module.

Each slot has one ``<slot>.yaml`` file whose top-level ``records`` key holds
the collection (or the single object, for ``generalSettings``).
"""

import logging
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import TypeAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEED_DIR = Path(__file__).resolve().parent


def _load_yaml(path: Path) -> dict | None:
    """Load a YAML file, returning None if it is missing or unparseable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("Seed file not found: %s", path)
    except yaml.YAMLError:
        logger.exception("Failed to parse seed file: %s", path)
    return None


def load_seed_raw(slot_key: str, seed_dir: Path = SEED_DIR) -> Any:
    """Return the untyped ``records`` value of ``<slot_key>.yaml`` (None if absent)."""
    data = _load_yaml(seed_dir / f"{slot_key}.yaml")
    if not data:
        return None
    return data.get("records")


def load_seed(slot_key: str, record_type: type[T], seed_dir: Path = SEED_DIR) -> list[T]:
    """Load and validate the seed collection for ``slot_key``.

    A missing file yields an empty collection; a file that does not match the
    entity type raises, since shipped seed data is part of the package.
    """
    raw = load_seed_raw(slot_key, seed_dir)
    if raw is None:
        return []
    records = TypeAdapter(list[record_type]).validate_python(raw)
    logger.debug("Loaded %d seed records for '%s'", len(records), slot_key)
    return records


def load_seed_object(slot_key: str, value_type: type[T], seed_dir: Path = SEED_DIR) -> T:
    """Load and validate a single-object seed such as general settings."""
    raw = load_seed_raw(slot_key, seed_dir)
    adapter = TypeAdapter(value_type)
    return adapter.validate_python(raw if raw is not None else {})
