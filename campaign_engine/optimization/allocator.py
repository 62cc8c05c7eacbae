"""
Budget allocation across creator tiers.

This module provides the BudgetTierAllocator class, which splits a campaign
budget over micro, mid-tier and premium creators and projects the aggregate
reach, engagement, conversions and ROI of that split.
"""

import logging

from ..config.schema import BudgetConfig, EngineConfig, default_config
from ..core.numeric import floor_int, round_half_away
from ..core.parameters import OfferCriteria
from ..core.validation import ParameterValidator
from .results import (
    BudgetOptimization,
    ProjectedMetrics,
    RecommendedCriteria,
    TierAllocation,
    TierAllocations,
)

logger = logging.getLogger(__name__)


class BudgetTierAllocator:
    """
    Split a budget over creator tiers with a fixed share per tier.

    Each tier buys as many whole creators as its share covers at the tier's
    average reward; reach and engagement follow from fixed per-creator
    figures.

    Parameters
    ----------
    config : EngineConfig, optional
        Engine configuration. Defaults to the shared default configuration.

    Examples
    --------
    >>> allocator = BudgetTierAllocator()
    >>> criteria = OfferCriteria(min_followers=2000, min_engagement=2,
    ...                          content_type="image", timeframe=7)
    >>> allocator.allocate(1000, criteria).projected_metrics.estimated_roi
    77
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config: BudgetConfig = (config or default_config()).budget
        self.validator = ParameterValidator()

    def allocate(self, total_budget: float, source_criteria: OfferCriteria) -> BudgetOptimization:
        """
        Allocate ``total_budget`` across tiers.

        Parameters
        ----------
        total_budget : float
            Total campaign budget in currency units.
        source_criteria : OfferCriteria
            Criteria of the existing offer; recommendations never go below them.

        Returns
        -------
        BudgetOptimization
            Per-tier split, projected metrics and recommended criteria.

        Raises
        ------
        InvalidParameterError
            If ``total_budget <= 0`` (ROI divides by it) or the criteria are invalid.
        """
        result = self.validator.validate_budget(total_budget)
        result.merge(self.validator.validate_criteria(source_criteria))
        result.raise_if_invalid()

        allocation = self._allocate_tiers(total_budget)
        metrics = self._project(total_budget, allocation)
        criteria = self._recommend_criteria(source_criteria)

        logger.info(
            f"Allocated ${total_budget:,.2f} across {allocation.total_creators} creators: "
            f"reach={metrics.total_reach:,}, conversions={metrics.estimated_conversions}, "
            f"ROI={metrics.estimated_roi}%"
        )
        return BudgetOptimization(
            total_budget=total_budget,
            allocation=allocation,
            projected_metrics=metrics,
            recommended_criteria=criteria,
        )

    def _allocate_tiers(self, total_budget: float) -> TierAllocations:
        tiers = {}
        for name, tier in self.config.tiers().items():
            amount = total_budget * tier.share
            count = floor_int(amount / tier.avg_reward)
            tiers[name] = TierAllocation(
                percentage=round(tier.share * 100, 10),
                amount=amount,
                count=count,
                avg_reward=tier.avg_reward,
                estimated_reach=count * tier.reach_per_creator,
            )
            logger.debug(f"{tier.display_name}: ${amount:,.2f} -> {count} creators")
        return TierAllocations(**tiers)

    def _project(self, total_budget: float, allocation: TierAllocations) -> ProjectedMetrics:
        cfg = self.config
        tiers = cfg.tiers()
        allocated = allocation.as_dict()

        total_reach = sum(tier.estimated_reach for tier in allocated.values())
        # Summed tier by tier, micro first
        engagement = floor_int(sum(
            allocated[name].estimated_reach * tiers[name].engagement_rate for name in allocated
        ))
        conversions = floor_int(engagement * cfg.conversion_rate)
        roi = round_half_away(conversions * cfg.customer_value / total_budget * 100)

        return ProjectedMetrics(
            total_reach=total_reach,
            estimated_engagement=engagement,
            estimated_conversions=conversions,
            estimated_roi=roi,
            # Fixed, unlike the forecast's ConfidenceScorer; the two call sites
            # should eventually share one scoring model.
            confidence_score=cfg.confidence_score,
        )

    def _recommend_criteria(self, source: OfferCriteria) -> RecommendedCriteria:
        cfg = self.config
        return RecommendedCriteria(
            min_followers=max(source.min_followers, cfg.min_followers_floor),
            min_engagement=max(source.min_engagement, cfg.min_engagement_floor),
            content_types=(source.content_type, cfg.supplementary_content_type),
            ideal_timeframe=max(source.timeframe, cfg.min_timeframe_days),
        )


def allocate_budget(
    total_budget: float,
    source_criteria: OfferCriteria,
    config: EngineConfig | None = None,
) -> BudgetOptimization:
    """Allocate with a BudgetTierAllocator built from ``config`` (or the defaults)."""
    return BudgetTierAllocator(config).allocate(total_budget, source_criteria)
