from .key_value_store import KeyValueStore
from .object_repository import ObjectRepository
from .record_repository import RecordRepository

__all__ = [
    "KeyValueStore",
    "ObjectRepository",
    "RecordRepository",
]
