"""
Custom exceptions for the warehouse model layer.
These exceptions describe payloads that do not match an entity's declared shape.
"""

from typing import Any, Dict, List, Optional


class ModelLayerError(Exception):
    """Base exception for model layer errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(message)


class FormatError(ModelLayerError):
    """Raised when a wire payload cannot be decoded into the requested entity."""

    def __init__(
        self,
        entity: str,
        field: Optional[str],
        reason: str,
        errors: Optional[List[Dict[str, Any]]] = None
    ):
        self.entity = entity
        self.field = field
        self.reason = reason
        self.errors = errors or []

        message = f"Invalid '{entity}' payload"
        if field:
            message += f": field '{field}'"
        message += f" - {reason}"

        details = None
        if len(self.errors) > 1:
            details = f"{len(self.errors)} validation errors"
        super().__init__(message, details)


class MissingFieldError(FormatError):
    """Raised when a required field is absent from the payload."""

    def __init__(self, entity: str, field: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(entity, field, "required field is missing", errors)


class InvalidFieldValueError(FormatError):
    """Raised when a present value cannot be converted to its declared type."""
    pass


class UnknownFieldError(FormatError):
    """Raised by strict decoding when the payload carries an unrecognised key."""

    def __init__(self, entity: str, field: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(entity, field, "unknown field", errors)


class ConfigurationError(ModelLayerError):
    """Raised when model layer configuration is invalid."""
    pass
