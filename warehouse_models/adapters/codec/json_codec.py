"""
JSON codec implementation of the ModelCodec port.
Uses pydantic's JSON core for parsing and rendering payloads.
"""

from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from ...core.config.config import config, logger as default_logger
from ...core.ports.codec import EntityT, ModelCodec
from ...core.ports.exceptions import FormatError
from ...core.ports.logger import Logger
from ...core.util.errorhandling import to_format_error
from ..models.base import FORBID_UNKNOWN_KEYS, WireModel


class JsonModelCodec(ModelCodec):
    """Encodes entities to UTF-8 JSON bytes and decodes JSON payloads into entities."""

    def __init__(self, strict: Optional[bool] = None, logger: Optional[Logger] = None):
        """
        Initialize the codec.

        Args:
            strict: Reject unknown keys when decoding; defaults to configuration
            logger: Logger to use; defaults to the package logger
        """
        self.strict = config.STRICT_DECODING if strict is None else strict
        self.logger = logger or default_logger

    def encode(self, entity: WireModel) -> bytes:
        payload = entity.to_json()
        self.logger.debug("Encoded entity", entity=type(entity).__name__, size=len(payload))
        return payload

    def decode(self, payload: Union[bytes, str], model_cls: Type[EntityT]) -> EntityT:
        try:
            entity = model_cls.model_validate_json(payload, context=self._context())
        except ValidationError as exc:
            raise self._format_error(model_cls, exc) from exc
        self.logger.debug("Decoded entity", entity=model_cls.__name__, size=len(payload))
        return entity

    def to_wire(self, entity: WireModel) -> Dict[str, Any]:
        return entity.to_wire()

    def from_wire(self, data: Any, model_cls: Type[EntityT]) -> EntityT:
        try:
            return model_cls.model_validate(data, context=self._context())
        except ValidationError as exc:
            raise self._format_error(model_cls, exc) from exc

    def _context(self) -> Dict[str, bool]:
        return {FORBID_UNKNOWN_KEYS: self.strict}

    def _format_error(self, model_cls: Type[BaseModel], exc: ValidationError) -> FormatError:
        error = to_format_error(model_cls, exc)
        self.logger.warn(
            "Rejected payload",
            entity=error.entity,
            field=error.field,
            reason=error.reason
        )
        return error
