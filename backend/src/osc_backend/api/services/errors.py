"""Domain errors raised by the service layer."""


class EmptyUpdateError(Exception):
    """Raised when a partial update carries no fields to change."""


class ResourceNotFoundError(Exception):
    """Raised when the targeted record does not exist."""


class ResourceConflictError(Exception):
    """Raised when a write would break a uniqueness rule."""
