"""
Base model shared by every wire entity.
Holds the naming, presence and immutability rules common to all payloads.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ...core.util.errorhandling import UNKNOWN_FIELD_ERROR_TYPE, to_format_error


FORBID_UNKNOWN_KEYS = "forbid_unknown_keys"


class WireModel(BaseModel):
    """
    Immutable entity with lower-camel-case wire keys.

    Optional fields default to None, which is the unset state: they are left
    out when encoding and restored to None when their key is absent.

    Field assignment is rejected, but list and dict values are plain Python
    containers and must not be modified in place. Entities holding them are
    not hashable.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def reject_unknown_keys(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or not (info.context or {}).get(FORBID_UNKNOWN_KEYS):
            return data
        known = cls.wire_keys()
        for key in data:
            if key not in known and key not in cls.model_fields:
                raise PydanticCustomError(
                    UNKNOWN_FIELD_ERROR_TYPE,
                    "Unknown field '{field}'",
                    {"field": key}
                )
        return data

    @classmethod
    def wire_keys(cls) -> Dict[str, str]:
        """Map each wire key to its Python field name."""
        return {
            (field.alias or name): name
            for name, field in cls.model_fields.items()
        }

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-compatible wire mapping, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> bytes:
        """Return the UTF-8 JSON wire payload, omitting unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")

    @classmethod
    def from_wire(cls, data: Any, strict: bool = False) -> "WireModel":
        """
        Build an entity from a parsed wire mapping.

        Args:
            data: Parsed payload
            strict: Reject keys the entity does not declare

        Returns:
            Entity instance

        Raises:
            FormatError: If the payload does not match the entity's shape
        """
        try:
            return cls.model_validate(data, context={FORBID_UNKNOWN_KEYS: strict})
        except ValidationError as exc:
            raise to_format_error(cls, exc) from exc
