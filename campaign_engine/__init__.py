"""
Campaign performance estimation engine.

Pure, deterministic calculators for influencer campaigns: three-point
forecasts, budget tier allocation, confidence scoring, risk annotations and
match-quality badges.
"""

__version__ = "1.0.0"

from campaign_engine.core import (
    CampaignParameters,
    ContentType,
    Industry,
    OfferCriteria,
    InvalidParameterError,
)
from campaign_engine.forecasting import ForecastCalculator, CampaignForecast, forecast_campaign
from campaign_engine.optimization import BudgetTierAllocator, BudgetOptimization, allocate_budget
from campaign_engine.matching import MatchQualityClassifier, MatchQuality, classify_match

__all__ = [
    "__version__",
    "CampaignParameters",
    "ContentType",
    "Industry",
    "OfferCriteria",
    "InvalidParameterError",
    "ForecastCalculator",
    "CampaignForecast",
    "forecast_campaign",
    "BudgetTierAllocator",
    "BudgetOptimization",
    "allocate_budget",
    "MatchQualityClassifier",
    "MatchQuality",
    "classify_match",
]
