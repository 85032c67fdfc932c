"""
Typed request/response models for the warehouse query service REST API.
"""

from .adapters.models import *  # noqa: F401,F403
from .adapters.models import __all__ as _model_names
from .adapters.codec.json_codec import JsonModelCodec
from .core.ports.codec import ModelCodec
from .core.ports.exceptions import (
    ModelLayerError,
    FormatError,
    MissingFieldError,
    InvalidFieldValueError,
    UnknownFieldError,
    ConfigurationError
)

__version__ = "1.0.0"

__all__ = list(_model_names) + [
    "JsonModelCodec",
    "ModelCodec",
    "ModelLayerError",
    "FormatError",
    "MissingFieldError",
    "InvalidFieldValueError",
    "UnknownFieldError",
    "ConfigurationError"
]
