"""
Unit tests for the ML evaluation metrics models.
"""

import pytest

from warehouse_models.adapters.models.metrics import (
    AggregateClassificationMetrics,
    ConfusionMatrix,
    Entry,
    MultiClassClassificationMetrics,
    Row
)
from warehouse_models.core.ports.exceptions import InvalidFieldValueError


class TestMultiClassClassificationMetrics:
    """Test cases for the multi-class metrics entity."""

    def test_decode_full_payload(self, multi_class_metrics_payload):
        """Test decoding aggregate metrics and confusion matrices."""
        metrics = MultiClassClassificationMetrics.from_wire(multi_class_metrics_payload)

        aggregate = metrics.aggregate_classification_metrics
        assert aggregate.f1_score == 0.88
        assert aggregate.roc_auc == 0.95
        assert len(metrics.confusion_matrix_list) == 1

        matrix = metrics.confusion_matrix_list[0]
        assert matrix.confidence_threshold == 0.5
        assert [row.actual_label for row in matrix.rows] == ["cat", "dog"]
        assert matrix.rows[1].entries[1] == Entry(predicted_label="dog", item_count="52")

    def test_round_trip(self, multi_class_metrics_payload):
        """Test that the payload survives decode then encode."""
        metrics = MultiClassClassificationMetrics.from_wire(multi_class_metrics_payload)

        assert metrics.to_wire() == multi_class_metrics_payload
        assert MultiClassClassificationMetrics.from_wire(metrics.to_wire()) == metrics

    def test_empty_payload(self):
        """Test that an empty object decodes to an entity with everything unset."""
        metrics = MultiClassClassificationMetrics.from_wire({})

        assert metrics.aggregate_classification_metrics is None
        assert metrics.confusion_matrix_list is None
        assert metrics.to_wire() == {}

    def test_empty_confusion_matrix_list(self):
        """Test that an explicitly empty list is kept distinct from unset."""
        metrics = MultiClassClassificationMetrics(confusion_matrix_list=[])

        assert metrics.to_wire() == {"confusionMatrixList": []}
        assert MultiClassClassificationMetrics.from_wire({"confusionMatrixList": []}).confusion_matrix_list == []

    def test_invalid_nested_item_count(self, multi_class_metrics_payload):
        """Test that a numeric item count is rejected with its full path."""
        multi_class_metrics_payload["confusionMatrixList"][0]["rows"][0]["entries"][1]["itemCount"] = 3

        with pytest.raises(InvalidFieldValueError) as exc_info:
            MultiClassClassificationMetrics.from_wire(multi_class_metrics_payload)

        assert exc_info.value.field == "confusionMatrixList[0].rows[0].entries[1].itemCount"

    def test_malformed_nested_structure(self):
        """Test that a nested entity given as a scalar is rejected."""
        with pytest.raises(InvalidFieldValueError) as exc_info:
            MultiClassClassificationMetrics.from_wire({"aggregateClassificationMetrics": "good"})

        assert exc_info.value.field == "aggregateClassificationMetrics"


class TestAggregateClassificationMetrics:
    """Test cases for the aggregate metrics entity."""

    @pytest.mark.parametrize("field_name,wire_key", [
        ("f1_score", "f1Score"),
        ("log_loss", "logLoss"),
        ("roc_auc", "rocAuc"),
        ("accuracy", "accuracy"),
    ])
    def test_wire_keys(self, field_name, wire_key):
        """Test the naming transform of metric fields."""
        assert AggregateClassificationMetrics.wire_keys()[wire_key] == field_name

    def test_integer_metric_values_are_accepted(self):
        """Test that integral JSON numbers decode into float fields."""
        metrics = AggregateClassificationMetrics.from_wire({"accuracy": 1, "threshold": 0})

        assert metrics.accuracy == 1.0
        assert metrics.threshold == 0.0

    @pytest.mark.parametrize("wire_key,wrong_type_value", [
        ("accuracy", "0.9"),
        ("threshold", True),
        ("rocAuc", "NaN"),
    ])
    def test_metric_values_must_be_json_numbers(self, wire_key, wrong_type_value):
        """Test that text and booleans are not coerced into metric values."""
        with pytest.raises(InvalidFieldValueError) as exc_info:
            AggregateClassificationMetrics.from_wire({wire_key: wrong_type_value})

        assert exc_info.value.field == wire_key


class TestConfusionMatrixRow:
    """Test cases for confusion matrix rows."""

    def test_row_with_only_label(self):
        """Test that a row without entries omits the entries key."""
        row = Row(actual_label="bird")

        assert row.to_wire() == {"actualLabel": "bird"}

    def test_row_with_empty_entries(self):
        """Test that an empty entries list is encoded."""
        row = Row(actual_label="bird", entries=[])

        assert row.to_wire() == {"actualLabel": "bird", "entries": []}
        assert Row.from_wire(row.to_wire()) == row

    def test_unknown_keys_are_dropped(self):
        """Test that unrecognised keys are ignored on decode and not re-encoded."""
        row = Row.from_wire({"actualLabel": "cat", "entries": [], "rowWeight": 2})

        assert row.to_wire() == {"actualLabel": "cat", "entries": []}

    def test_confusion_matrix_equality_is_structural(self):
        """Test that equal field values produce equal entities."""
        first = ConfusionMatrix(confidence_threshold=0.3, rows=[Row(actual_label="a")])
        second = ConfusionMatrix(confidence_threshold=0.3, rows=[Row(actual_label="a")])

        assert first == second
        assert first is not second
