"""Domain-specific exceptions: framework-independent."""


class ContentError(Exception):
    """Base class for every error raised by the content subsystem."""


class NotFoundError(ContentError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(ContentError):
    """Raised when a payload or request violates content rules.

    ``errors`` carries one message per offending field so callers can show
    all problems at once.
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        self.message = message
        self.errors = list(errors or [])
        detail = f"{message}: {', '.join(self.errors)}" if self.errors else message
        super().__init__(detail)


class DuplicateEntityError(ValidationError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidStateError(ContentError):
    """Raised when an operation is illegal for the item's current status."""

    def __init__(self, content_id: str, status: str, operation: str):
        self.content_id = content_id
        self.status = status
        self.operation = operation
        super().__init__(
            f"Cannot {operation} content '{content_id}' while its status is '{status}'"
        )


class StorageError(ContentError):
    """Raised when the persistence layer fails. The pre-write state is unchanged."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Storage failure during {operation}: {message}")
