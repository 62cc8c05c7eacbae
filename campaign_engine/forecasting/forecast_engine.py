"""
Campaign performance forecast engine.

Turns campaign parameters into three-point (conservative / expected /
optimistic) estimates along the funnel reach -> engagement -> actions ->
results -> ROI, plus a timeline, a confidence score and qualitative
annotations.
"""

from dataclasses import dataclass
from enum import Enum
import logging

import pandas as pd

from ..config.schema import EngineConfig, IntervalSpread, default_config
from ..core.numeric import floor_int, round_half_away
from ..core.parameters import CampaignParameters
from ..core.validation import require_valid_parameters
from .confidence import ConfidenceScorer
from .risks import ForecastInsights, OptimizationTip, RiskAndTipGenerator, RiskFactor

logger = logging.getLogger(__name__)


class Trend(str, Enum):
    """Qualitative direction shown next to an interval."""
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class Interval:
    """
    Three-point estimate.

    ``lower <= expected <= upper`` holds for every funnel metric but is not
    enforced here: ROI bounds are produced by the same multipliers and can
    invert when the expected ROI is negative.
    """
    lower: int
    expected: int
    upper: int
    trend: Trend = Trend.STABLE

    @classmethod
    def from_expected(cls, expected: int, spread: IntervalSpread, trend: Trend) -> "Interval":
        return cls(
            lower=round_half_away(expected * spread.lower),
            expected=expected,
            upper=round_half_away(expected * spread.upper),
            trend=trend,
        )

    @property
    def is_ordered(self) -> bool:
        return self.lower <= self.expected <= self.upper

    def to_dict(self) -> dict:
        return {
            "lower": self.lower,
            "expected": self.expected,
            "upper": self.upper,
            "trend": self.trend.value,
        }


@dataclass(frozen=True)
class RoiForecast:
    """ROI as a percentage of spend and as net currency value."""
    percentage: Interval
    value: Interval

    def to_dict(self) -> dict:
        return {"percentage": self.percentage.to_dict(), "value": self.value.to_dict()}


@dataclass(frozen=True)
class TimeToResults:
    """Campaign timeline in days."""
    first_results: int
    peak_performance: int
    longevity: int

    def to_dict(self) -> dict:
        return {
            "firstResults": self.first_results,
            "peakPerformance": self.peak_performance,
            "longevity": self.longevity,
        }


@dataclass(frozen=True)
class CampaignForecast:
    """
    Result of a campaign forecast.

    ``clicks`` are the "actions" of the funnel and ``conversions`` its
    "results"; the names match what the display layer expects.
    """

    reach: Interval
    engagement: Interval
    clicks: Interval
    conversions: Interval
    roi: RoiForecast
    time_to_results: TimeToResults
    confidence: int
    risk_factors: tuple[RiskFactor, ...]
    optimization_tips: tuple[OptimizationTip, ...]
    insights: ForecastInsights

    @property
    def funnel(self) -> dict[str, Interval]:
        """Funnel intervals keyed by metric name, top of funnel first."""
        return {
            "reach": self.reach,
            "engagement": self.engagement,
            "clicks": self.clicks,
            "conversions": self.conversions,
        }

    def to_dict(self) -> dict:
        """JSON-serializable dictionary using the display layer's field names."""
        return {
            "reach": self.reach.to_dict(),
            "engagement": self.engagement.to_dict(),
            "clicks": self.clicks.to_dict(),
            "conversions": self.conversions.to_dict(),
            "roi": self.roi.to_dict(),
            "timeToResults": self.time_to_results.to_dict(),
            "confidence": self.confidence,
            "riskFactors": [risk.to_dict() for risk in self.risk_factors],
            "optimizationTips": [tip.to_dict() for tip in self.optimization_tips],
            "insights": self.insights.to_dict(),
        }

    def to_dataframe(self) -> pd.DataFrame:
        """
        One row per interval metric.

        Returns:
            DataFrame with columns: metric, lower, expected, upper, trend
        """
        rows = [
            {"metric": name, **interval.to_dict()}
            for name, interval in self.funnel.items()
        ]
        rows.append({"metric": "roi_percentage", **self.roi.percentage.to_dict()})
        rows.append({"metric": "roi_value", **self.roi.value.to_dict()})
        return pd.DataFrame(rows, columns=["metric", "lower", "expected", "upper", "trend"])


class ForecastCalculator:
    """
    Forecast campaign performance from its parameters.

    The calculator is stateless apart from its configuration, so one instance
    can serve any number of concurrent callers.

    Parameters
    ----------
    config : EngineConfig, optional
        Engine configuration. Defaults to the shared default configuration.

    Examples
    --------
    >>> calculator = ForecastCalculator()
    >>> params = CampaignParameters(
    ...     budget_per_creator=500, creator_count=3, average_followers=10000,
    ...     average_engagement_percent=4, campaign_duration_days=14,
    ...     content_type="video", industry="fashion",
    ... )
    >>> calculator.forecast(params).reach.expected
    22500
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or default_config()
        self.confidence_scorer = ConfidenceScorer(self.config.confidence)
        self.annotator = RiskAndTipGenerator()

    def forecast(self, params: CampaignParameters) -> CampaignForecast:
        """
        Produce the full forecast for ``params``.

        Raises
        ------
        InvalidParameterError
            If any precondition fails, including a zero total cost (ROI
            percentage would be undefined).
        """
        require_valid_parameters(params)
        cfg = self.config.forecast

        reach = self._reach(params)
        engagement = self._engagement(params, reach.expected)
        clicks = self._actions(params, engagement.expected)
        conversions = Interval.from_expected(
            round_half_away(clicks.expected * cfg.result_rate), cfg.result_spread, Trend.STABLE
        )
        roi = self._roi(params, conversions.expected)
        risk_factors, tips = self.annotator.generate(params)

        result = CampaignForecast(
            reach=reach,
            engagement=engagement,
            clicks=clicks,
            conversions=conversions,
            roi=roi,
            time_to_results=self._timeline(params),
            confidence=self.confidence_scorer.score(params),
            risk_factors=tuple(risk_factors),
            optimization_tips=tuple(tips),
            insights=self.annotator.insights(params),
        )

        logger.info(
            f"Forecast {params.content_type.value}/{params.industry.value}: "
            f"reach={reach.expected:,}, conversions={conversions.expected:,}, "
            f"ROI={roi.percentage.expected}%, confidence={result.confidence}"
        )
        return result

    def action_multiplier(self, params: CampaignParameters) -> float:
        """Combined content-type and industry uplift on the base action rate."""
        cfg = self.config.forecast
        multiplier = 1.0
        multiplier *= cfg.content_action_multipliers.get(params.content_type, 1.0)
        multiplier *= cfg.industry_action_multipliers.get(params.industry, 1.0)
        return multiplier

    def _reach(self, params: CampaignParameters) -> Interval:
        cfg = self.config.forecast
        view_ratio = cfg.view_ratio(params.content_type)
        expected = round_half_away(params.total_potential_reach * view_ratio)
        logger.debug(
            f"Potential reach {params.total_potential_reach:,} x view ratio {view_ratio} = {expected:,}"
        )
        return Interval.from_expected(expected, cfg.reach_spread, Trend.UP)

    def _engagement(self, params: CampaignParameters, expected_reach: int) -> Interval:
        cfg = self.config.forecast
        engagement_ratio = params.average_engagement_percent / 100
        expected = round_half_away(expected_reach * engagement_ratio)
        return Interval.from_expected(expected, cfg.engagement_spread, Trend.STABLE)

    def _actions(self, params: CampaignParameters, expected_engagement: int) -> Interval:
        cfg = self.config.forecast
        action_rate = cfg.base_action_rate * self.action_multiplier(params)
        expected = round_half_away(expected_engagement * action_rate)
        logger.debug(f"Action rate {action_rate:.4f} -> {expected} expected actions")
        return Interval.from_expected(expected, cfg.action_spread, Trend.UP)

    def _roi(self, params: CampaignParameters, expected_results: int) -> RoiForecast:
        cfg = self.config.forecast
        total_revenue = expected_results * cfg.customer_value(params.industry)
        total_cost = params.total_cost

        expected_pct = round_half_away((total_revenue / total_cost - 1) * 100)
        # Same multipliers as the funnel; with a negative expected ROI the
        # optimistic bound falls below the conservative one. Left as is until
        # product confirms the intended bounds.
        percentage = Interval(
            lower=max(cfg.roi_percentage_floor, round_half_away(expected_pct * cfg.roi_percentage_spread.lower)),
            expected=expected_pct,
            upper=round_half_away(expected_pct * cfg.roi_percentage_spread.upper),
            trend=Trend.UP,
        )

        expected_value = round_half_away(total_revenue - total_cost)
        value = Interval(
            lower=round_half_away((total_revenue - total_cost) * cfg.roi_value_spread.lower),
            expected=expected_value,
            upper=round_half_away((total_revenue - total_cost) * cfg.roi_value_spread.upper),
            trend=Trend.UP,
        )
        return RoiForecast(percentage=percentage, value=value)

    def _timeline(self, params: CampaignParameters) -> TimeToResults:
        cfg = self.config.forecast
        duration = params.campaign_duration_days
        return TimeToResults(
            first_results=cfg.first_results_days,
            peak_performance=floor_int(duration * cfg.peak_performance_fraction),
            longevity=duration + cfg.longevity_extension_days,
        )


def forecast_campaign(params: CampaignParameters, config: EngineConfig | None = None) -> CampaignForecast:
    """Forecast ``params`` with a calculator built from ``config`` (or the defaults)."""
    return ForecastCalculator(config).forecast(params)
