"""
Match-quality classification for creator/offer pairs.

The numeric match score is computed upstream by the matching service; this
module only turns it into the badge, rating and ordering the marketplace
shows.
"""

from dataclasses import dataclass
from typing import Mapping
import logging

from ..config.schema import EngineConfig, MatchConfig, ScoreBand, default_config
from ..core.validation import ParameterValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchQuality:
    """Badge for a match score. ``tier_index`` 0 is the best tier."""
    label: str
    tier_index: int
    highlighted: bool = False
    rating: str = ""

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "tierIndex": self.tier_index,
            "highlighted": self.highlighted,
            "rating": self.rating,
        }


@dataclass(frozen=True)
class RankedMatch:
    """A creator's place in a ranked marketplace listing."""
    creator_id: str
    match_score: float
    quality: MatchQuality

    def to_dict(self) -> dict:
        return {
            "creatorId": self.creator_id,
            "matchScore": self.match_score,
            "quality": self.quality.to_dict(),
        }


def _first_band(score: float, bands: list[ScoreBand]) -> int | None:
    for index, band in enumerate(bands):
        if score >= band.min_score:
            return index
    return None


class MatchQualityClassifier:
    """
    Threshold lookup from match score to quality tier.

    Thresholds are evaluated top-down and the first match wins. Scores are
    not clamped: anything above 100 is still a Best Match and anything below
    0 a Potential Match.

    Parameters
    ----------
    config : EngineConfig, optional
        Engine configuration. Defaults to the shared default configuration.
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config: MatchConfig = (config or default_config()).matching
        self.validator = ParameterValidator()

    def classify(self, match_score: float) -> MatchQuality:
        """
        Quality badge for ``match_score``.

        Raises
        ------
        InvalidParameterError
            If the score is not a number (NaN cannot be placed on the scale).
        """
        self.validator.validate_match_score(match_score).raise_if_invalid()
        cfg = self.config

        index = _first_band(match_score, cfg.quality_bands)
        if index is None:
            label, index = cfg.fallback_quality, len(cfg.quality_bands)
        else:
            label = cfg.quality_bands[index].label

        return MatchQuality(
            label=label,
            tier_index=index,
            highlighted=match_score >= cfg.highlight_threshold,
            rating=self._rating(match_score),
        )

    def rate(self, match_score: float) -> str:
        """Word shown inside the score ring (Excellent ... Poor)."""
        self.validator.validate_match_score(match_score).raise_if_invalid()
        return self._rating(match_score)

    def rank(self, scores: Mapping[str, float]) -> list[RankedMatch]:
        """
        Order creators by descending match score.

        Ties keep their input order.
        """
        ranked = [
            RankedMatch(creator_id=creator_id, match_score=score, quality=self.classify(score))
            for creator_id, score in scores.items()
        ]
        ranked.sort(key=lambda match: match.match_score, reverse=True)
        logger.debug(f"Ranked {len(ranked)} creators")
        return ranked

    def _rating(self, match_score: float) -> str:
        bands = self.config.rating_bands
        index = _first_band(match_score, bands)
        return self.config.fallback_rating if index is None else bands[index].label


def classify_match(match_score: float, config: EngineConfig | None = None) -> MatchQuality:
    """Classify with a MatchQualityClassifier built from ``config`` (or the defaults)."""
    return MatchQualityClassifier(config).classify(match_score)
