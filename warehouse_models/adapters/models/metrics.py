"""
Pydantic models for ML model evaluation metrics.
"""

from typing import List, Optional

from pydantic import Field, StrictFloat

from .base import WireModel
from .types import Int64String


class AggregateClassificationMetrics(WireModel):
    """
    Aggregate metrics for classification models.

    For multi-class models the values are macro-averaged over all labels.
    """
    accuracy: Optional[StrictFloat] = Field(None, description="Accuracy of the model")
    f1_score: Optional[StrictFloat] = Field(None, description="Harmonic mean of precision and recall")
    log_loss: Optional[StrictFloat] = Field(None, description="Logarithmic loss")
    precision: Optional[StrictFloat] = Field(None, description="Precision of the model")
    recall: Optional[StrictFloat] = Field(None, description="Recall of the model")
    roc_auc: Optional[StrictFloat] = Field(None, description="Area under the receiver operating characteristic curve")
    threshold: Optional[StrictFloat] = Field(None, description="Threshold at which the metrics are computed")


class Entry(WireModel):
    """A single entry in the confusion matrix."""
    item_count: Optional[Int64String] = Field(None, description="Number of items predicted as this label")
    predicted_label: Optional[str] = Field(None, description="The predicted label")


class Row(WireModel):
    """A single row in the confusion matrix."""
    actual_label: Optional[str] = Field(None, description="The original label of this row")
    entries: Optional[List[Entry]] = Field(None, description="Info describing predicted label distribution")


class ConfusionMatrix(WireModel):
    """Confusion matrix for multi-class classification models."""
    confidence_threshold: Optional[StrictFloat] = Field(None, description="Confidence threshold used when computing the entries")
    rows: Optional[List[Row]] = Field(None, description="One row per actual label")


class MultiClassClassificationMetrics(WireModel):
    """Evaluation metrics for multi-class classification models."""
    aggregate_classification_metrics: Optional[AggregateClassificationMetrics] = Field(
        None,
        description="Aggregate classification metrics"
    )
    confusion_matrix_list: Optional[List[ConfusionMatrix]] = Field(
        None,
        description="Confusion matrix at different thresholds"
    )
