#!/usr/bin/env python3
"""
Example script for building and reading warehouse API payloads.
This demonstrates basic usage of the models and the JSON codec.
"""

from warehouse_models import (
    DatasetReference,
    FormatError,
    JsonModelCodec,
    ParameterMode,
    QueryParameter,
    QueryParameterType,
    QueryParameterValue,
    QueryRequest,
    QueryResponse,
)


codec = JsonModelCodec()


def build_simple_request():
    """Build a request from query text only."""
    print("Building simple query request...")

    request = QueryRequest.from_sql("SELECT 1")
    print(f"Body: {codec.encode(request).decode('utf-8')}")


def build_parameterized_request():
    """Build a request with a dataset, parameters and a billing cap."""
    print("\nBuilding parameterized query request...")

    request = QueryRequest(
        query="SELECT name FROM people WHERE age > @min_age",
        use_legacy_sql=False,
        default_dataset=DatasetReference(dataset_id="census", project_id="my-project"),
        parameter_mode=ParameterMode.NAMED,
        query_parameters=[
            QueryParameter(
                name="min_age",
                parameter_type=QueryParameterType(type="INT64"),
                parameter_value=QueryParameterValue(value="21")
            )
        ],
        maximum_bytes_billed="1000000000",
        labels={"team": "analytics"}
    )
    print(f"Body: {codec.encode(request).decode('utf-8')}")


def read_response():
    """Decode a query response body."""
    print("\nReading query response...")

    body = (
        b'{"kind": "bigquery#queryResponse", "jobComplete": true, "totalRows": "2",'
        b' "schema": {"fields": [{"name": "name", "type": "STRING"}]},'
        b' "rows": [{"f": [{"v": "Ada"}]}, {"f": [{"v": "Grace"}]}]}'
    )
    response = codec.decode(body, QueryResponse)
    print(f"Complete: {response.job_complete}, total rows: {response.total_rows}")
    for row in response.rows:
        print(f"  {[cell.v for cell in row.f]}")


def read_malformed_response():
    """Show the error raised for a payload with a missing required field."""
    print("\nReading malformed request body...")

    try:
        codec.decode(b'{"query": "SELECT 1"}', QueryRequest)
    except FormatError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    build_simple_request()
    build_parameterized_request()
    read_response()
    read_malformed_response()
