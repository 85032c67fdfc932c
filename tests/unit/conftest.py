"""
Test configuration and fixtures for unit tests.
"""

import sys
from pathlib import Path

# Add project root directory to Python path so the package can be found
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
from unittest.mock import MagicMock

from warehouse_models.adapters.codec.json_codec import JsonModelCodec
from warehouse_models.core.ports.logger import Logger


@pytest.fixture
def mock_logger():
    """Fixture providing a mock Logger."""
    mock_logger = MagicMock(spec=Logger)
    return mock_logger


@pytest.fixture
def codec(mock_logger):
    """Fixture providing a lenient JSON codec."""
    return JsonModelCodec(strict=False, logger=mock_logger)


@pytest.fixture
def strict_codec(mock_logger):
    """Fixture providing a JSON codec that rejects unknown keys."""
    return JsonModelCodec(strict=True, logger=mock_logger)


@pytest.fixture
def query_request_payload():
    """Fixture providing a fully populated query request body."""
    return {
        "query": "SELECT name FROM people WHERE age > @min_age",
        "useLegacySql": False,
        "connectionProperties": [{"key": "time_zone", "value": "UTC"}],
        "defaultDataset": {"datasetId": "census", "projectId": "my-project"},
        "dryRun": False,
        "kind": "bigquery#queryRequest",
        "labels": {"team": "analytics", "env": "prod"},
        "location": "EU",
        "maxResults": 1000,
        "maximumBytesBilled": "1000000000",
        "parameterMode": "NAMED",
        "preserveNulls": True,
        "queryParameters": [
            {
                "name": "min_age",
                "parameterType": {"type": "INT64"},
                "parameterValue": {"value": "21"}
            }
        ],
        "requestId": "6f1c2f8e-2b7e-4c39-9f5e-1f2d3c4b5a69",
        "timeoutMs": 10000,
        "useQueryCache": True
    }


@pytest.fixture
def multi_class_metrics_payload():
    """Fixture providing a multi-class evaluation metrics body."""
    return {
        "aggregateClassificationMetrics": {
            "accuracy": 0.91,
            "f1Score": 0.88,
            "logLoss": 0.27,
            "precision": 0.9,
            "recall": 0.86,
            "rocAuc": 0.95,
            "threshold": 0.5
        },
        "confusionMatrixList": [
            {
                "confidenceThreshold": 0.5,
                "rows": [
                    {
                        "actualLabel": "cat",
                        "entries": [
                            {"predictedLabel": "cat", "itemCount": "40"},
                            {"predictedLabel": "dog", "itemCount": "3"}
                        ]
                    },
                    {
                        "actualLabel": "dog",
                        "entries": [
                            {"predictedLabel": "cat", "itemCount": "5"},
                            {"predictedLabel": "dog", "itemCount": "52"}
                        ]
                    }
                ]
            }
        ]
    }


@pytest.fixture
def query_response_payload():
    """Fixture providing a completed query response body."""
    return {
        "kind": "bigquery#queryResponse",
        "schema": {
            "fields": [
                {"name": "name", "type": "STRING", "mode": "NULLABLE"},
                {
                    "name": "address",
                    "type": "RECORD",
                    "fields": [
                        {"name": "city", "type": "STRING"},
                        {"name": "zip", "type": "STRING"}
                    ]
                }
            ]
        },
        "jobReference": {"projectId": "my-project", "jobId": "job_abc123", "location": "EU"},
        "totalRows": "2",
        "rows": [
            {"f": [{"v": "Ada"}, {"v": {"f": [{"v": "London"}, {"v": "NW1"}]}}]},
            {"f": [{"v": "Grace"}, {"v": None}]}
        ],
        "totalBytesProcessed": "18446744073709551615",
        "jobComplete": True,
        "cacheHit": False
    }
