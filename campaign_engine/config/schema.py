"""
Pydantic schemas for engine configuration.

Every constant the calculators use (funnel rates, interval spreads, industry
customer values, tier rewards, confidence rules, match thresholds) lives
here rather than inline in the formulas, so a table can be tuned and tested
on its own. The defaults reproduce the production behaviour exactly.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.parameters import ContentType, Industry


class FrozenModel(BaseModel):
    """Base for immutable configuration sections."""
    model_config = ConfigDict(frozen=True, extra="forbid")


# =============================================================================
# Forecast
# =============================================================================

class IntervalSpread(FrozenModel):
    """Multipliers turning an expected value into conservative/optimistic bounds."""
    lower: float = Field(..., ge=0, description="Conservative multiplier")
    upper: float = Field(..., ge=0, description="Optimistic multiplier")


class ForecastConfig(FrozenModel):
    """Funnel constants used by the forecast calculator."""
    default_view_ratio: float = Field(0.60, gt=0, le=1, description="Share of followers reached")
    content_view_ratios: dict[ContentType, float] = Field(
        default_factory=lambda: {ContentType.VIDEO: 0.75},
        description="View ratio overrides by content type",
    )
    base_action_rate: float = Field(0.015, gt=0, le=1, description="Actions per engagement")
    content_action_multipliers: dict[ContentType, float] = Field(
        default_factory=lambda: {ContentType.VIDEO: 1.2},
    )
    industry_action_multipliers: dict[Industry, float] = Field(
        default_factory=lambda: {Industry.TECHNOLOGY: 1.3, Industry.FASHION: 1.15},
    )
    result_rate: float = Field(0.08, gt=0, le=1, description="Results (conversions) per action")
    customer_values: dict[Industry, float] = Field(
        default_factory=lambda: {
            Industry.RETAIL: 45,
            Industry.RESTAURANT: 28,
            Industry.FASHION: 65,
            Industry.BEAUTY: 55,
            Industry.TECHNOLOGY: 120,
            Industry.DEFAULT: 45,
        },
        description="Average customer value per result, by industry",
    )

    reach_spread: IntervalSpread = IntervalSpread(lower=0.6, upper=1.4)
    engagement_spread: IntervalSpread = IntervalSpread(lower=0.7, upper=1.5)
    action_spread: IntervalSpread = IntervalSpread(lower=0.6, upper=1.6)
    result_spread: IntervalSpread = IntervalSpread(lower=0.6, upper=1.7)
    roi_percentage_spread: IntervalSpread = IntervalSpread(lower=0.5, upper=1.8)
    roi_value_spread: IntervalSpread = IntervalSpread(lower=0.6, upper=1.5)
    roi_percentage_floor: int = Field(0, description="Conservative ROI % never drops below this")

    first_results_days: int = Field(2, ge=0)
    peak_performance_fraction: float = Field(0.6, ge=0, le=1, description="Fraction of the campaign at peak")
    longevity_extension_days: int = Field(7, ge=0, description="Days results persist after the campaign")

    @field_validator("customer_values")
    @classmethod
    def requires_default_value(cls, v):
        if Industry.DEFAULT not in v:
            raise ValueError("customer_values must include a 'default' entry")
        return v

    @model_validator(mode="after")
    def funnel_spreads_bracket_expected(self) -> "ForecastConfig":
        # Keeps lower <= expected <= upper for the non-negative funnel metrics
        for name in ("reach_spread", "engagement_spread", "action_spread", "result_spread"):
            spread = getattr(self, name)
            if not spread.lower <= 1 <= spread.upper:
                raise ValueError(f"{name} must satisfy lower <= 1 <= upper, got {spread}")
        return self

    def view_ratio(self, content_type: ContentType) -> float:
        return self.content_view_ratios.get(content_type, self.default_view_ratio)

    def customer_value(self, industry: Industry) -> float:
        return self.customer_values.get(industry, self.customer_values[Industry.DEFAULT])


# =============================================================================
# Confidence
# =============================================================================

class ThresholdBonus(FrozenModel):
    """Points added once a value reaches a threshold."""
    threshold: float
    bonus: int


class ConfidenceConfig(FrozenModel):
    """Rules of the confidence scorer. Bonuses within a list are cumulative."""
    base_score: int = 75
    min_score: int = 60
    max_score: int = 95
    creator_count_bonuses: list[ThresholdBonus] = Field(
        default_factory=lambda: [
            ThresholdBonus(threshold=5, bonus=5),
            ThresholdBonus(threshold=10, bonus=3),
        ]
    )
    engagement_bonuses: list[ThresholdBonus] = Field(
        default_factory=lambda: [
            ThresholdBonus(threshold=4, bonus=3),
            ThresholdBonus(threshold=6, bonus=2),
        ]
    )
    long_campaign_days: int = Field(21, description="Campaigns longer than this lose confidence")
    long_campaign_penalty: int = 3
    industry_bonuses: dict[Industry, int] = Field(
        default_factory=lambda: {Industry.TECHNOLOGY: 2, Industry.FASHION: 4}
    )

    @model_validator(mode="after")
    def base_within_bounds(self) -> "ConfidenceConfig":
        if not self.min_score <= self.base_score <= self.max_score:
            raise ValueError(
                f"base_score {self.base_score} must lie in [{self.min_score}, {self.max_score}]"
            )
        return self


# =============================================================================
# Budget tiers
# =============================================================================

class TierConfig(FrozenModel):
    """One creator-size bracket used by the budget allocator."""
    display_name: str
    share: float = Field(..., ge=0, le=1, description="Fraction of the total budget")
    avg_reward: float = Field(..., gt=0, description="Average payment per creator")
    reach_per_creator: int = Field(..., ge=0)
    engagement_rate: float = Field(..., ge=0, le=1)


class BudgetConfig(FrozenModel):
    """Tier table and projection constants for the budget allocator."""
    micro_influencers: TierConfig = TierConfig(
        display_name="Micro-Influencers", share=0.40, avg_reward=150,
        reach_per_creator=8000, engagement_rate=0.05,
    )
    mid_tier: TierConfig = TierConfig(
        display_name="Mid-Tier", share=0.40, avg_reward=350,
        reach_per_creator=30000, engagement_rate=0.03,
    )
    premium: TierConfig = TierConfig(
        display_name="Premium", share=0.20, avg_reward=1000,
        reach_per_creator=100000, engagement_rate=0.01,
    )
    conversion_rate: float = Field(0.01, ge=0, le=1, description="Conversions per engagement")
    customer_value: float = Field(45, ge=0, description="Revenue per conversion")
    confidence_score: int = Field(80, ge=0, le=100)

    min_followers_floor: int = 5000
    min_engagement_floor: float = 3
    supplementary_content_type: str = "story"
    min_timeframe_days: int = 14

    @model_validator(mode="after")
    def shares_cover_budget(self) -> "BudgetConfig":
        total = sum(tier.share for tier in self.tiers().values())
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Tier shares must sum to 1.0, got {total}")
        return self

    def tiers(self) -> dict[str, TierConfig]:
        """Tiers keyed by their allocation field name, in display order."""
        return {
            "micro_influencers": self.micro_influencers,
            "mid_tier": self.mid_tier,
            "premium": self.premium,
        }


# =============================================================================
# Match quality
# =============================================================================

class ScoreBand(FrozenModel):
    """Label assigned to scores at or above ``min_score``."""
    label: str
    min_score: float


class MatchConfig(FrozenModel):
    """Thresholds for match-quality badges and score ratings."""
    quality_bands: list[ScoreBand] = Field(
        default_factory=lambda: [
            ScoreBand(label="Best Match", min_score=85),
            ScoreBand(label="Great Match", min_score=70),
            ScoreBand(label="Good Match", min_score=50),
        ]
    )
    fallback_quality: str = "Potential Match"
    highlight_threshold: float = Field(70, description="Scores at or above get the award marker")
    rating_bands: list[ScoreBand] = Field(
        default_factory=lambda: [
            ScoreBand(label="Excellent", min_score=90),
            ScoreBand(label="Great", min_score=75),
            ScoreBand(label="Good", min_score=60),
            ScoreBand(label="Fair", min_score=45),
        ]
    )
    fallback_rating: str = "Poor"

    @field_validator("quality_bands", "rating_bands")
    @classmethod
    def bands_descending(cls, v):
        scores = [band.min_score for band in v]
        if scores != sorted(scores, reverse=True) or len(set(scores)) != len(scores):
            raise ValueError("Score bands must be listed in strictly descending min_score order")
        return v


# =============================================================================
# Root
# =============================================================================

class EngineConfig(FrozenModel):
    """Complete configuration for the estimation engine."""
    name: str = Field("default", description="Configuration name")
    description: Optional[str] = Field(None, description="Free-text description")
    forecast: ForecastConfig = ForecastConfig()
    confidence: ConfidenceConfig = ConfidenceConfig()
    budget: BudgetConfig = BudgetConfig()
    matching: MatchConfig = MatchConfig()


_DEFAULT_CONFIG = EngineConfig()


def default_config() -> EngineConfig:
    """Shared default configuration (immutable, safe to reuse)."""
    return _DEFAULT_CONFIG
