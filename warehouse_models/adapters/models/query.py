"""
Pydantic models for the synchronous query endpoint.
These models describe the request body sent to run a query and the response it returns.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field, StrictBool, field_validator

from .base import WireModel
from .table import TableRow, TableSchema
from .types import Int32, Int64String


class ParameterMode(str, Enum):
    """Known ways of binding query parameters in standard SQL. The wire field is free text."""
    POSITIONAL = "POSITIONAL"
    NAMED = "NAMED"


class ConnectionProperty(WireModel):
    """A connection-level property to customize query behavior."""
    key: Optional[str] = Field(None, description="Name of the connection property, e.g. time_zone")
    value: Optional[str] = Field(None, description="Value of the connection property")


class DatasetReference(WireModel):
    """Identifies a dataset."""
    dataset_id: str = Field(..., description="Dataset ID, letters, numbers and underscores only")
    project_id: Optional[str] = Field(None, description="ID of the project containing the dataset")


class QueryParameterType(WireModel):
    """Type of a query parameter."""
    type: str = Field(..., description="Top level type, e.g. INT64, ARRAY or STRUCT")
    array_type: Optional["QueryParameterType"] = Field(None, description="Element type when the parameter is an array")
    struct_types: Optional[List["QueryParameterStructType"]] = Field(
        None,
        description="Member types when the parameter is a struct"
    )


class QueryParameterStructType(WireModel):
    """Type of one struct member."""
    name: Optional[str] = Field(None, description="Name of the member")
    type: QueryParameterType = Field(..., description="Type of the member")
    description: Optional[str] = Field(None, description="Human-readable description of the member")


class QueryParameterValue(WireModel):
    """Value of a query parameter."""
    value: Optional[str] = Field(None, description="Scalar value, as text")
    array_values: Optional[List["QueryParameterValue"]] = Field(None, description="Values of an array parameter")
    struct_values: Optional[Dict[str, "QueryParameterValue"]] = Field(
        None,
        description="Member values of a struct parameter, keyed by member name"
    )


class QueryParameter(WireModel):
    """A parameter bound into a standard SQL query."""
    name: Optional[str] = Field(None, description="Parameter name; omitted for positional parameters")
    parameter_type: QueryParameterType = Field(..., description="Type of the parameter")
    parameter_value: QueryParameterValue = Field(..., description="Value of the parameter")


class QueryRequest(WireModel):
    """Request body for running a query and waiting for its results."""
    query: str = Field(..., description="Query text to execute")
    use_legacy_sql: StrictBool = Field(
        ...,
        description="Use the legacy SQL dialect; false runs the query as standard SQL"
    )
    connection_properties: Optional[List[ConnectionProperty]] = Field(None, description="Connection properties")
    default_dataset: Optional[DatasetReference] = Field(
        None,
        description="Dataset used for unqualified table names in the query"
    )
    dry_run: Optional[StrictBool] = Field(
        None,
        description="Validate the query and return statistics without running it"
    )
    kind: Optional[str] = Field(None, description="Resource type of the request")
    labels: Optional[Dict[str, str]] = Field(None, description="Labels attached to the job")
    location: Optional[str] = Field(None, description="Geographic location where the job should run")
    max_results: Optional[Int32] = Field(None, description="Maximum number of rows returned per page")
    maximum_bytes_billed: Optional[Int64String] = Field(
        None,
        description="Queries billing more bytes than this fail without charge"
    )
    parameter_mode: Optional[str] = Field(
        None,
        description="POSITIONAL for (?) or NAMED for (@param) parameters; see ParameterMode"
    )
    preserve_nulls: Optional[StrictBool] = Field(None, description="Deprecated")
    query_parameters: Optional[List[QueryParameter]] = Field(None, description="Parameters for standard SQL queries")
    request_id: Optional[str] = Field(
        None,
        description="Client-supplied identifier making the request idempotent for 15 minutes"
    )
    timeout_ms: Optional[Int32] = Field(
        None,
        description="How long to wait for the query to complete, in milliseconds"
    )
    use_query_cache: Optional[StrictBool] = Field(None, description="Look for the result in the query cache")

    @field_validator("parameter_mode", mode="before")
    @classmethod
    def parameter_mode_value(cls, v):
        """Accept ParameterMode members as their text value."""
        return v.value if isinstance(v, ParameterMode) else v

    @classmethod
    def from_sql(cls, sql_query: str) -> "QueryRequest":
        """Create a standard SQL request with every optional field unset."""
        return cls(query=sql_query, use_legacy_sql=False)


class JobReference(WireModel):
    """Identifies a job."""
    project_id: str = Field(..., description="ID of the project containing the job")
    job_id: str = Field(..., description="ID of the job")
    location: Optional[str] = Field(None, description="Geographic location of the job")


class ErrorProto(WireModel):
    """An error or warning reported for a job."""
    reason: Optional[str] = Field(None, description="Short error code")
    location: Optional[str] = Field(None, description="Where the error occurred, if known")
    debug_info: Optional[str] = Field(None, description="Debugging information")
    message: Optional[str] = Field(None, description="Human-readable description of the error")


class QueryResponse(WireModel):
    """Response body returned by the query endpoint."""
    kind: Optional[str] = Field(None, description="Resource type of the response")
    table_schema: Optional[TableSchema] = Field(None, alias="schema", description="Schema of the results")
    job_reference: Optional[JobReference] = Field(None, description="Reference to the job that ran the query")
    total_rows: Optional[Int64String] = Field(None, description="Total number of rows in the complete result set")
    page_token: Optional[str] = Field(None, description="Token to request the next page of results")
    rows: Optional[List[TableRow]] = Field(None, description="Result rows of the current page")
    total_bytes_processed: Optional[Int64String] = Field(None, description="Bytes processed by the query")
    job_complete: Optional[StrictBool] = Field(None, description="Whether the query has completed")
    errors: Optional[List[ErrorProto]] = Field(None, description="Errors and warnings raised while running the job")
    cache_hit: Optional[StrictBool] = Field(None, description="Whether the result came from the query cache")
    num_dml_affected_rows: Optional[Int64String] = Field(None, description="Rows affected by a DML statement")


QueryParameterType.model_rebuild()
QueryParameterStructType.model_rebuild()
QueryParameterValue.model_rebuild()
QueryParameter.model_rebuild()
QueryRequest.model_rebuild()
