"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ReferenceNotFoundError(EntityNotFoundError):
    """Raised when a create/update names another entity that does not exist.

    Subclasses EntityNotFoundError so callers that only care about
    "something was missing" can catch the parent.
    """

    def __init__(self, entity_type: str, entity_id: int | str):
        super().__init__(entity_type, entity_id)
        self.args = (f"Referenced {entity_type} with id '{entity_id}' not found",)


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class PersistenceError(Exception):
    """Raised (or returned) when a collection slot could not be written."""

    def __init__(self, slot_key: str, cause: Exception):
        self.slot_key = slot_key
        self.cause = cause
        super().__init__(f"Failed to persist slot '{slot_key}': {type(cause).__name__}: {cause}")


class StorageQuotaExceededError(Exception):
    """Raised by a key-value store when a write would exceed its byte quota."""

    def __init__(self, key: str, required: int, quota: int):
        self.key = key
        self.required = required
        self.quota = quota
        super().__init__(f"Writing '{key}' needs {required} bytes; quota is {quota}")
