"""Custom exceptions for the application."""
from typing import Any


class EntityNotFound(Exception):
    """Raised when an entity is not found in the database."""

    def __init__(self, entity_name: str, entity_id: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_id: ID of the entity that was not found
        """
        super().__init__(f"{entity_name} with ID {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationFailed(Exception):
    """Raised when input data cannot be turned into a valid domain model."""

    def __init__(self, errors: list[Any]):
        """
        Initialize the exception.

        Args:
            errors: Every field-level problem found, in detection order
        """
        super().__init__(f"Validation failed with {len(errors)} error(s)")
        self.errors = errors


class StorageUnavailable(Exception):
    """Raised when the storage engine fails to execute a query."""

    def __init__(self, operation: str):
        super().__init__(f"Storage operation '{operation}' failed")
        self.operation = operation


class PayloadTooLarge(Exception):
    """Raised when a request body exceeds the configured size limit."""

    def __init__(self, limit: int):
        super().__init__(f"Request body exceeds {limit} bytes")
        self.limit = limit
