"""
Tests for forecasting/confidence.py - Forecast confidence scoring.
"""

import pytest

from campaign_engine.config.schema import ConfidenceConfig, ThresholdBonus
from campaign_engine.core.parameters import CampaignParameters
from campaign_engine.forecasting.confidence import ConfidenceScorer


def make_params(creators=1, engagement=1.0, duration=14, industry="default") -> CampaignParameters:
    return CampaignParameters(
        budget_per_creator=100,
        creator_count=creators,
        average_followers=5000,
        average_engagement_percent=engagement,
        campaign_duration_days=duration,
        industry=industry,
    )


# =============================================================================
# Default Rules
# =============================================================================

class TestDefaultRules:
    """Tests for the production scoring rules."""

    @pytest.fixture
    def scorer(self):
        return ConfidenceScorer()

    def test_base_score(self, scorer):
        assert scorer.score(make_params()) == 75

    @pytest.mark.parametrize("creators,expected", [
        (4, 75),
        (5, 80),
        (9, 80),
        (10, 83),
        (50, 83),
    ])
    def test_creator_bonuses_are_cumulative(self, scorer, creators, expected):
        assert scorer.score(make_params(creators=creators)) == expected

    @pytest.mark.parametrize("engagement,expected", [
        (3.99, 75),
        (4, 78),
        (5.99, 78),
        (6, 80),
    ])
    def test_engagement_bonuses(self, scorer, engagement, expected):
        assert scorer.score(make_params(engagement=engagement)) == expected

    def test_long_campaign_penalty(self, scorer):
        """Penalty applies only beyond 21 days."""
        assert scorer.score(make_params(duration=21)) == 75
        assert scorer.score(make_params(duration=22)) == 72

    @pytest.mark.parametrize("industry,expected", [
        ("technology", 77),
        ("fashion", 79),
        ("retail", 75),
        ("beauty", 75),
    ])
    def test_industry_bonus(self, scorer, industry, expected):
        assert scorer.score(make_params(industry=industry)) == expected

    def test_everything_combined(self, scorer):
        """75 + 8 + 5 + 4; the defaults never reach the 95 cap."""
        assert scorer.score(make_params(creators=10, engagement=6, industry="fashion")) == 92


# =============================================================================
# Clamping
# =============================================================================

class TestClamping:
    """Scores are clamped to [min_score, max_score]."""

    def test_clamped_to_max(self):
        config = ConfidenceConfig(
            base_score=90,
            creator_count_bonuses=[ThresholdBonus(threshold=1, bonus=20)],
        )
        assert ConfidenceScorer(config).score(make_params()) == 95

    def test_clamped_to_min(self):
        config = ConfidenceConfig(base_score=62, long_campaign_penalty=30)
        assert ConfidenceScorer(config).score(make_params(duration=60)) == 60
