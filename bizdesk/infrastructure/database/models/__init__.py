from .kv_slot import KeyValueSlotModel

__all__ = [
    "KeyValueSlotModel",
]
