"""
Tests for config/schema.py - Pydantic configuration schemas.
"""

import pytest
from pydantic import ValidationError

from campaign_engine.config.schema import (
    BudgetConfig,
    ConfidenceConfig,
    EngineConfig,
    ForecastConfig,
    IntervalSpread,
    MatchConfig,
    ScoreBand,
    TierConfig,
    default_config,
)
from campaign_engine.core.parameters import ContentType, Industry


# =============================================================================
# Defaults
# =============================================================================

class TestDefaults:
    """The default configuration carries the production constants."""

    def test_default_config_is_shared(self):
        assert default_config() is default_config()

    def test_forecast_defaults(self):
        cfg = ForecastConfig()
        assert cfg.view_ratio(ContentType.VIDEO) == 0.75
        assert cfg.view_ratio(ContentType.STORY) == 0.60
        assert cfg.base_action_rate == 0.015
        assert cfg.result_rate == 0.08
        assert cfg.roi_percentage_spread == IntervalSpread(lower=0.5, upper=1.8)

    @pytest.mark.parametrize("industry,value", [
        (Industry.RETAIL, 45),
        (Industry.RESTAURANT, 28),
        (Industry.FASHION, 65),
        (Industry.BEAUTY, 55),
        (Industry.TECHNOLOGY, 120),
        (Industry.DEFAULT, 45),
    ])
    def test_customer_values(self, industry, value):
        assert ForecastConfig().customer_value(industry) == value

    def test_budget_tiers_in_order(self):
        tiers = BudgetConfig().tiers()
        assert list(tiers) == ["micro_influencers", "mid_tier", "premium"]
        assert [t.avg_reward for t in tiers.values()] == [150, 350, 1000]

    def test_match_thresholds(self):
        bands = MatchConfig().quality_bands
        assert [(b.label, b.min_score) for b in bands] == [
            ("Best Match", 85), ("Great Match", 70), ("Good Match", 50),
        ]


# =============================================================================
# Validation
# =============================================================================

class TestSchemaValidation:
    """Invalid tables are rejected at construction."""

    def test_frozen(self):
        with pytest.raises(ValidationError):
            default_config().name = "changed"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            EngineConfig(unknown_section={})

    def test_customer_values_need_default(self):
        with pytest.raises(ValidationError, match="default"):
            ForecastConfig(customer_values={Industry.RETAIL: 45})

    def test_funnel_spread_must_bracket_expected(self):
        with pytest.raises(ValidationError):
            ForecastConfig(reach_spread=IntervalSpread(lower=1.1, upper=1.4))

    def test_roi_spread_not_bracketed(self):
        """ROI spreads are free; only funnel spreads must bracket 1."""
        cfg = ForecastConfig(roi_value_spread=IntervalSpread(lower=1.2, upper=1.5))
        assert cfg.roi_value_spread.lower == 1.2

    def test_tier_shares_must_sum_to_one(self):
        with pytest.raises(ValidationError, match="sum to 1.0"):
            BudgetConfig(premium=TierConfig(
                display_name="Premium", share=0.5, avg_reward=1000,
                reach_per_creator=100000, engagement_rate=0.01,
            ))

    def test_bands_must_descend(self):
        with pytest.raises(ValidationError):
            MatchConfig(quality_bands=[
                ScoreBand(label="Good", min_score=50),
                ScoreBand(label="Best", min_score=85),
            ])

    def test_confidence_base_within_bounds(self):
        with pytest.raises(ValidationError):
            ConfidenceConfig(base_score=50)

    def test_enum_keys_from_strings(self):
        cfg = ForecastConfig(customer_values={"default": 40, "retail": 50})
        assert cfg.customer_value(Industry.RETAIL) == 50
        assert cfg.customer_value(Industry.BEAUTY) == 40
