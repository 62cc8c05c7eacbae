"""
Confidence scoring for campaign forecasts.
"""

import logging

from ..config.schema import ConfidenceConfig, default_config
from ..core.parameters import CampaignParameters

logger = logging.getLogger(__name__)


class ConfidenceScorer:
    """
    Map campaign parameters to a confidence percentage.

    More creators and higher engagement make results more predictable, long
    campaigns less so, and some industries have more consistent history.
    The score is clamped to ``[min_score, max_score]`` (60-95 by default).

    Parameters
    ----------
    config : ConfidenceConfig, optional
        Scoring rules. Defaults to the shared engine configuration.
    """

    def __init__(self, config: ConfidenceConfig | None = None):
        self.config = config or default_config().confidence

    def score(self, params: CampaignParameters) -> int:
        """Confidence percentage for ``params``."""
        cfg = self.config
        confidence = cfg.base_score

        for rule in cfg.creator_count_bonuses:
            if params.creator_count >= rule.threshold:
                confidence += rule.bonus

        for rule in cfg.engagement_bonuses:
            if params.average_engagement_percent >= rule.threshold:
                confidence += rule.bonus

        if params.campaign_duration_days > cfg.long_campaign_days:
            confidence -= cfg.long_campaign_penalty

        confidence += cfg.industry_bonuses.get(params.industry, 0)

        clamped = min(cfg.max_score, max(cfg.min_score, confidence))
        logger.debug(f"Confidence raw={confidence} clamped={clamped}")
        return clamped
