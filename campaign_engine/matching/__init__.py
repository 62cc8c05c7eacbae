"""Match-quality badges and ranking for the marketplace."""

from campaign_engine.matching.quality import (
    MatchQualityClassifier,
    MatchQuality,
    RankedMatch,
    classify_match,
)

__all__ = [
    "MatchQualityClassifier",
    "MatchQuality",
    "RankedMatch",
    "classify_match",
]
