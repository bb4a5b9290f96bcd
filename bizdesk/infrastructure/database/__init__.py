from .base import Base
from .session import create_engine, create_session_factory
from .models import KeyValueSlotModel
from .key_value_store import SQLAlchemyKeyValueStore

__all__ = [
    "Base",
    "create_engine",
    "create_session_factory",
    "KeyValueSlotModel",
    "SQLAlchemyKeyValueStore",
]
