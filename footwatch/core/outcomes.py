"""
Prediction outcome rules.

Canonical confidence scale, fallback outcome and recommendation text
shared by the prediction pipeline and direct report submission.

Dependencies: None (pure domain layer)
System role: Deterministic prediction rules
"""

import enum
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

NORMAL_CONDITION = "normal"
CONFIDENCE_MIN = 0
CONFIDENCE_MAX = 100

ROUTINE_RECOMMENDATION = "Maintain routine checks."
CLINICIAN_RECOMMENDATION = "Consult a clinician."

# Field defaults when the model answers but omits a field
DEFAULT_CONDITION = "unknown"
DEFAULT_CONFIDENCE = 0
DEFAULT_MODEL_VERSION = "n/a"

# Column width of reports.condition and reports.model_version
MAX_LABEL_LENGTH = 255


class ReportSource(str, enum.Enum):
    """Where a report's outcome came from."""

    MODEL = "model"
    FALLBACK = "fallback"
    SUBMITTED = "submitted"


@dataclass(frozen=True)
class PredictionOutcome:
    """Condition, confidence (0-100) and model version of one prediction."""

    condition: str
    confidence: int
    model_version: str
    source: ReportSource

    @property
    def recommendation(self) -> str:
        return recommend(self.condition)


FALLBACK_OUTCOME = PredictionOutcome(
    condition=NORMAL_CONDITION,
    confidence=50,
    model_version="fallback",
    source=ReportSource.FALLBACK,
)


def recommend(condition: str) -> str:
    """Two-way recommendation: routine for normal, clinician otherwise."""
    if condition == NORMAL_CONDITION:
        return ROUTINE_RECOMMENDATION
    return CLINICIAN_RECOMMENDATION


def normalize_confidence(value: Any) -> int | None:
    """
    Map a confidence onto the integer 0-100 percentage scale.

    One rule for every numeric type and every caller: a value in [0, 1]
    is a probability and is rescaled, a value in (1, 100] is already a
    percentage and is rounded. ``1`` and ``1.0`` both mean 100.

    Args:
        value: Raw confidence from a model response or client

    Returns:
        int | None: Percentage, or None when the value is not a number
            or falls outside both scales
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    if 0.0 <= number <= 1.0:
        number *= 100
    if not CONFIDENCE_MIN <= number <= CONFIDENCE_MAX:
        return None
    return int(round(number))


def outcome_from_model(payload: dict[str, Any]) -> PredictionOutcome:
    """
    Adopt a model response field by field.

    Missing or unusable fields fall back to ``unknown`` / ``0`` / ``n/a``.
    Labels longer than the report columns count as unusable.
    """
    condition = payload.get("condition")
    if not isinstance(condition, str) or not condition.strip() or len(condition) > MAX_LABEL_LENGTH:
        condition = DEFAULT_CONDITION

    confidence = normalize_confidence(payload.get("confidence"))
    if confidence is None:
        confidence = DEFAULT_CONFIDENCE

    model_version = payload.get("model_version")
    if model_version is None or isinstance(model_version, (dict, list)):
        model_version = DEFAULT_MODEL_VERSION
    model_version = str(model_version)
    if len(model_version) > MAX_LABEL_LENGTH:
        model_version = DEFAULT_MODEL_VERSION

    return PredictionOutcome(
        condition=condition,
        confidence=confidence,
        model_version=model_version,
        source=ReportSource.MODEL,
    )
