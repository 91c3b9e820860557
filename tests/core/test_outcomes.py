"""
Test suite for prediction outcome rules.

System role: Verification of confidence scale, fallback and recommendations
"""

import pytest

from footwatch.core.outcomes import (
    CLINICIAN_RECOMMENDATION,
    FALLBACK_OUTCOME,
    ROUTINE_RECOMMENDATION,
    ReportSource,
    normalize_confidence,
    outcome_from_model,
    recommend,
)


class TestNormalizeConfidence:
    """Test suite for normalize_confidence()."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (0.87, 87),
            (0.0, 0),
            (1.0, 100),
            (87, 87),
            (1, 100),
            (0.5, 50),
            (42.6, 43),
            (100, 100),
        ],
    )
    def test_maps_onto_percentage_scale(self, raw, expected) -> None:
        """Test fractions are rescaled and percentages rounded."""
        assert normalize_confidence(raw) == expected

    def test_integer_and_float_one_agree(self) -> None:
        """Test the scale does not depend on how the number was serialized."""
        assert normalize_confidence(1) == normalize_confidence(1.0) == 100
        assert normalize_confidence(0) == normalize_confidence(0.0) == 0

    @pytest.mark.parametrize("raw", [-1, 101, 150.0, "0.9", None, True, float("nan")])
    def test_rejects_unusable_values(self, raw) -> None:
        """Test out-of-range and non-numeric values yield None."""
        assert normalize_confidence(raw) is None


class TestOutcomeFromModel:
    """Test suite for outcome_from_model()."""

    def test_adopts_model_fields(self) -> None:
        """Test a complete model response is adopted."""
        # Act
        outcome = outcome_from_model(
            {"condition": "diabetic_ulcer_risk", "confidence": 0.91, "model_version": "v3.2"}
        )

        # Assert
        assert outcome.condition == "diabetic_ulcer_risk"
        assert outcome.confidence == 91
        assert outcome.model_version == "v3.2"
        assert outcome.source is ReportSource.MODEL
        assert outcome.recommendation == CLINICIAN_RECOMMENDATION

    def test_defaults_missing_fields(self) -> None:
        """Test an empty response falls back field by field."""
        outcome = outcome_from_model({})

        assert outcome.condition == "unknown"
        assert outcome.confidence == 0
        assert outcome.model_version == "n/a"
        assert outcome.source is ReportSource.MODEL

    def test_defaults_out_of_range_confidence(self) -> None:
        """Test an impossible confidence is replaced, not clamped."""
        outcome = outcome_from_model({"condition": "normal", "confidence": 250})

        assert outcome.confidence == 0
        assert outcome.recommendation == ROUTINE_RECOMMENDATION

    def test_oversized_labels_use_defaults(self) -> None:
        """Test labels wider than the report columns are replaced."""
        # Act
        outcome = outcome_from_model(
            {"condition": "x" * 300, "confidence": 0.4, "model_version": "v" * 256}
        )

        # Assert
        assert outcome.condition == "unknown"
        assert outcome.model_version == "n/a"
        assert outcome.confidence == 40

    def test_label_at_column_width_is_kept(self) -> None:
        outcome = outcome_from_model({"condition": "c" * 255, "model_version": "m" * 255})

        assert len(outcome.condition) == 255
        assert len(outcome.model_version) == 255

    def test_numeric_model_version_is_stringified(self) -> None:
        """Test numeric versions are kept as text."""
        assert outcome_from_model({"model_version": 7}).model_version == "7"


class TestFallbackAndRecommendation:
    """Test suite for the fallback outcome and recommend()."""

    def test_fallback_outcome(self) -> None:
        """Test the fixed fallback values."""
        assert FALLBACK_OUTCOME.condition == "normal"
        assert FALLBACK_OUTCOME.confidence == 50
        assert FALLBACK_OUTCOME.model_version == "fallback"
        assert FALLBACK_OUTCOME.source is ReportSource.FALLBACK
        assert FALLBACK_OUTCOME.recommendation == ROUTINE_RECOMMENDATION

    @pytest.mark.parametrize(
        "condition,expected",
        [
            ("normal", ROUTINE_RECOMMENDATION),
            ("high_pressure", CLINICIAN_RECOMMENDATION),
            ("Normal", CLINICIAN_RECOMMENDATION),
        ],
    )
    def test_recommend(self, condition, expected) -> None:
        """Test the two-way recommendation is an exact match on normal."""
        assert recommend(condition) == expected
