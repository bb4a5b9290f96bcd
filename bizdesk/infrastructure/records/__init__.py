from .record_store import PersistResult, RecordStore
from .collection_repository import SlotCollectionRepository
from .object_repository import SlotObjectRepository

__all__ = [
    "PersistResult",
    "RecordStore",
    "SlotCollectionRepository",
    "SlotObjectRepository",
]
