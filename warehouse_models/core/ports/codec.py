"""
Codec Port - Abstract interface for converting entities to and from the wire format.
Transport components depend on this port instead of a concrete serializer.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel


EntityT = TypeVar("EntityT", bound=BaseModel)


class ModelCodec(ABC):
    """Abstract base class for entity codecs."""

    @abstractmethod
    def encode(self, entity: BaseModel) -> bytes:
        """
        Encode an entity into a request body.

        Args:
            entity: Entity instance to encode

        Returns:
            Encoded payload bytes
        """
        pass

    @abstractmethod
    def decode(self, payload: Union[bytes, str], model_cls: Type[EntityT]) -> EntityT:
        """
        Decode a response body into an entity of the given shape.

        Args:
            payload: Raw payload as bytes or text
            model_cls: Entity class describing the expected shape

        Returns:
            Decoded entity instance

        Raises:
            FormatError: If the payload does not match the entity's shape
        """
        pass

    @abstractmethod
    def to_wire(self, entity: BaseModel) -> Dict[str, Any]:
        """
        Convert an entity into its wire-format mapping.

        Args:
            entity: Entity instance to convert

        Returns:
            JSON-compatible dictionary keyed by wire names
        """
        pass

    @abstractmethod
    def from_wire(self, data: Any, model_cls: Type[EntityT]) -> EntityT:
        """
        Build an entity from an already parsed wire-format mapping.

        Args:
            data: Parsed payload, normally a dictionary
            model_cls: Entity class describing the expected shape

        Returns:
            Decoded entity instance

        Raises:
            FormatError: If the mapping does not match the entity's shape
        """
        pass
