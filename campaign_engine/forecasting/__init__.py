"""
Forecasting module for campaign performance estimates.

Provides the forecast calculator and the scorers/annotators it composes.
"""

from campaign_engine.forecasting.forecast_engine import (
    ForecastCalculator,
    CampaignForecast,
    Interval,
    RoiForecast,
    TimeToResults,
    Trend,
    forecast_campaign,
)
from campaign_engine.forecasting.confidence import ConfidenceScorer
from campaign_engine.forecasting.risks import (
    RiskAndTipGenerator,
    RiskFactor,
    OptimizationTip,
    ForecastInsights,
    Severity,
    TipImpact,
    Difficulty,
)

__all__ = [
    "ForecastCalculator",
    "CampaignForecast",
    "Interval",
    "RoiForecast",
    "TimeToResults",
    "Trend",
    "forecast_campaign",
    # Leaf components
    "ConfidenceScorer",
    "RiskAndTipGenerator",
    # Annotation types
    "RiskFactor",
    "OptimizationTip",
    "ForecastInsights",
    "Severity",
    "TipImpact",
    "Difficulty",
]
