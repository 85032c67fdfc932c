"""
Models package for the adapters layer.
Contains Pydantic models for warehouse API request/response serialization.
"""

from .base import WireModel
from .types import Int32, Int64String
from .iam import (
    GetPolicyOptions,
    GetIamPolicyRequest,
    Expr,
    Binding,
    Policy
)
from .metrics import (
    AggregateClassificationMetrics,
    Entry,
    Row,
    ConfusionMatrix,
    MultiClassClassificationMetrics
)
from .table import (
    TableFieldSchema,
    TableSchema,
    TableCell,
    TableRow
)
from .query import (
    ParameterMode,
    ConnectionProperty,
    DatasetReference,
    QueryParameterType,
    QueryParameterStructType,
    QueryParameterValue,
    QueryParameter,
    QueryRequest,
    JobReference,
    ErrorProto,
    QueryResponse
)

__all__ = [
    "WireModel",
    "Int32",
    "Int64String",
    "GetPolicyOptions",
    "GetIamPolicyRequest",
    "Expr",
    "Binding",
    "Policy",
    "AggregateClassificationMetrics",
    "Entry",
    "Row",
    "ConfusionMatrix",
    "MultiClassClassificationMetrics",
    "TableFieldSchema",
    "TableSchema",
    "TableCell",
    "TableRow",
    "ParameterMode",
    "ConnectionProperty",
    "DatasetReference",
    "QueryParameterType",
    "QueryParameterStructType",
    "QueryParameterValue",
    "QueryParameter",
    "QueryRequest",
    "JobReference",
    "ErrorProto",
    "QueryResponse"
]
