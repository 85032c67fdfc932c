"""
Error handling utilities for the model layer.
Translates pydantic validation failures into the package's format errors.
"""

from typing import Any, Dict, Iterable, List, Type, Union

from pydantic import BaseModel, ValidationError

from ..ports.exceptions import (
    FormatError,
    MissingFieldError,
    InvalidFieldValueError,
    UnknownFieldError
)


UNKNOWN_FIELD_ERROR_TYPE = "unknown_field"


def format_location(loc: Iterable[Union[str, int]]) -> str:
    """
    Render a validation error location as a dotted wire path.

    Args:
        loc: Location tuple reported by pydantic

    Returns:
        Path such as ``confusionMatrixList[0].rows``
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def to_format_error(model_cls: Type[BaseModel], exc: ValidationError) -> FormatError:
    """
    Convert a pydantic ValidationError into the most specific FormatError.

    The first reported error decides the field and reason; the full list is
    kept on the returned exception.

    Args:
        model_cls: Entity class that was being decoded
        exc: Validation error raised by pydantic

    Returns:
        FormatError subclass describing the failure
    """
    entity = model_cls.__name__
    errors: List[Dict[str, Any]] = exc.errors(include_url=False, include_input=False)
    if not errors:
        return InvalidFieldValueError(entity, None, str(exc))

    first = errors[0]
    error_type = first.get("type")
    loc = tuple(first.get("loc", ()))

    if error_type == "missing":
        return MissingFieldError(entity, format_location(loc), errors)

    if error_type == UNKNOWN_FIELD_ERROR_TYPE:
        unknown_key = (first.get("ctx") or {}).get("field")
        return UnknownFieldError(entity, format_location(loc + (unknown_key,)), errors)

    return InvalidFieldValueError(entity, format_location(loc) or None, first.get("msg", str(exc)), errors)
