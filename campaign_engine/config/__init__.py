"""Configuration management for the campaign estimation engine."""

from .schema import (
    EngineConfig,
    ForecastConfig,
    ConfidenceConfig,
    BudgetConfig,
    MatchConfig,
    TierConfig,
    IntervalSpread,
    ThresholdBonus,
    ScoreBand,
    default_config,
)
from .loader import ConfigLoader

__all__ = [
    "EngineConfig",
    "ForecastConfig",
    "ConfidenceConfig",
    "BudgetConfig",
    "MatchConfig",
    "TierConfig",
    "IntervalSpread",
    "ThresholdBonus",
    "ScoreBand",
    "default_config",
    "ConfigLoader",
]
