"""
Budget Optimization Module for the campaign estimation engine.

Key components:
- BudgetTierAllocator: splits a budget across micro, mid-tier and premium creators
- BudgetOptimization: result dataclass with per-tier rows and projected metrics

Usage:
    from campaign_engine.optimization import BudgetTierAllocator
    from campaign_engine.core import OfferCriteria

    allocator = BudgetTierAllocator()
    criteria = OfferCriteria(min_followers=5000, min_engagement=3,
                             content_type="image", timeframe=14)
    result = allocator.allocate(2500, criteria)
    print(result.to_dataframe())
"""

from campaign_engine.optimization.results import (
    BudgetOptimization,
    TierAllocation,
    TierAllocations,
    ProjectedMetrics,
    RecommendedCriteria,
)
from campaign_engine.optimization.allocator import BudgetTierAllocator, allocate_budget

__all__ = [
    # Main classes
    "BudgetTierAllocator",
    # Result types
    "BudgetOptimization",
    "TierAllocation",
    "TierAllocations",
    "ProjectedMetrics",
    "RecommendedCriteria",
    # Utility functions
    "allocate_budget",
]
