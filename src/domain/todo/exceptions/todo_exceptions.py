from __future__ import annotations


class TodoError(Exception):
    pass


class ValidationError(TodoError, ValueError):
    pass


class TodoDescriptionEmptyError(ValidationError):
    pass


class StorageUnavailableError(TodoError):
    """The todo storage backend could not be reached."""
