from .memory_store import InMemoryKeyValueStore
from .json_file_store import JsonFileKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
