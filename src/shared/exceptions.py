"""Custom exceptions for the application."""
from typing import Any


class DomainError(Exception):
    """Base class for failures the API reports with a specific HTTP status."""

    status_code: int = 500


class EntityValidationFailed(DomainError):
    """Raised when an entity's field values break its invariants."""

    status_code = 400

    def __init__(self, entity_name: str, errors: list[str]):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that failed validation
            errors: Every violated rule, in rule order
        """
        super().__init__(f"{entity_name} is invalid: {'; '.join(errors)}")
        self.entity_name = entity_name
        self.errors = list(errors)


class EntityNotFound(DomainError):
    """Raised when an entity is not found in the database."""

    status_code = 404

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


class ConflictingEntityFound(DomainError):
    """Raised when an entity with a conflicting field already exists."""

    status_code = 409

    def __init__(self, entity_name: str, field_name: str, field_value: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
        """
        super().__init__(f"{entity_name} with {field_name} '{field_value}' already exists")
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value
