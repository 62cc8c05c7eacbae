"""
Tests for core/validation.py - Precondition checks.
"""

import logging

import pytest

from campaign_engine.core.exceptions import InvalidParameterError
from campaign_engine.core.parameters import CampaignParameters, OfferCriteria
from campaign_engine.core.validation import (
    ParameterValidator,
    ValidationResult,
    require_valid_parameters,
)


def make_params(**overrides) -> CampaignParameters:
    values = dict(
        budget_per_creator=500,
        creator_count=3,
        average_followers=10000,
        average_engagement_percent=4,
        campaign_duration_days=14,
    )
    values.update(overrides)
    return CampaignParameters(**values)


# =============================================================================
# ValidationResult Tests
# =============================================================================

class TestValidationResult:
    """Tests for the ValidationResult dataclass."""

    def test_init_valid_by_default(self):
        """ValidationResult starts valid with empty errors/warnings."""
        result = ValidationResult(valid=True)
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_add_error_sets_invalid(self):
        result = ValidationResult(valid=True)
        result.add_error("Something went wrong")

        assert result.valid is False
        assert result.errors == ["Something went wrong"]

    def test_add_warning_keeps_valid(self):
        result = ValidationResult(valid=True)
        result.add_warning("This is a warning")

        assert result.valid is True
        assert result.warnings == ["This is a warning"]

    def test_merge_invalid_result_propagates(self):
        result1 = ValidationResult(valid=True)
        result1.add_warning("Warning from result1")
        result2 = ValidationResult(valid=True)
        result2.add_error("Error from result2")

        result1.merge(result2)

        assert result1.valid is False
        assert result1.errors == ["Error from result2"]
        assert result1.warnings == ["Warning from result1"]

    def test_raise_if_invalid_carries_all_errors(self):
        result = ValidationResult(valid=True)
        result.add_error("first")
        result.add_error("second")

        with pytest.raises(InvalidParameterError) as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.errors == ["first", "second"]
        assert str(exc_info.value) == "first; second"

    def test_raise_if_invalid_logs_warnings(self, caplog):
        result = ValidationResult(valid=True)
        result.add_warning("heads up")

        with caplog.at_level(logging.WARNING):
            result.raise_if_invalid()
        assert "heads up" in caplog.text

    def test_str(self):
        result = ValidationResult(valid=True)
        result.add_error("bad")
        text = str(result)
        assert "Validation FAILED" in text
        assert "bad" in text


# =============================================================================
# ParameterValidator Tests
# =============================================================================

class TestValidateParameters:
    """Tests for forecast parameter checks."""

    @pytest.fixture
    def validator(self):
        return ParameterValidator()

    def test_valid(self, validator):
        result = validator.validate_parameters(make_params())
        assert result.valid
        assert result.warnings == []

    def test_boolean_is_not_a_count(self, validator):
        result = validator.validate_parameters(make_params(creator_count=True))
        assert not result.valid

    def test_whole_float_count_accepted(self, validator):
        assert validator.validate_parameters(make_params(creator_count=3.0)).valid

    def test_engagement_bounds_inclusive(self, validator):
        assert validator.validate_parameters(make_params(average_engagement_percent=0)).valid
        assert validator.validate_parameters(make_params(average_engagement_percent=100)).valid

    def test_zero_followers_warns(self, validator):
        result = validator.validate_parameters(make_params(average_followers=0))
        assert result.valid
        assert len(result.warnings) == 1

    def test_long_campaign_warns(self, validator):
        result = validator.validate_parameters(make_params(campaign_duration_days=120))
        assert result.valid
        assert "120 days" in result.warnings[0]

    def test_zero_cost_is_error(self, validator):
        result = validator.validate_parameters(make_params(budget_per_creator=0))
        assert not result.valid
        assert "greater than zero" in result.errors[0]

    def test_require_valid_parameters(self):
        with pytest.raises(InvalidParameterError):
            require_valid_parameters(make_params(campaign_duration_days=-3))


class TestValidateOtherInputs:
    """Tests for budget, criteria and match score checks."""

    @pytest.fixture
    def validator(self):
        return ParameterValidator()

    @pytest.mark.parametrize("budget,valid", [
        (1000, True),
        (0.01, True),
        (0, False),
        (-1, False),
        (float("nan"), False),
        ("1000", False),
    ])
    def test_validate_budget(self, validator, budget, valid):
        assert validator.validate_budget(budget).valid is valid

    def test_validate_criteria(self, validator, small_criteria):
        assert validator.validate_criteria(small_criteria).valid

    def test_validate_criteria_negative_timeframe(self, validator):
        criteria = OfferCriteria(min_followers=0, min_engagement=0, content_type="image", timeframe=-1)
        assert not validator.validate_criteria(criteria).valid

    def test_match_score_out_of_range_warns(self, validator):
        result = validator.validate_match_score(120)
        assert result.valid
        assert len(result.warnings) == 1

    def test_match_score_nan_is_error(self, validator):
        assert not validator.validate_match_score(float("nan")).valid
