"""
Result dataclasses for budget tier allocation.
"""

from dataclasses import dataclass
import pandas as pd


@dataclass(frozen=True)
class TierAllocation:
    """Budget assigned to one creator tier."""
    percentage: float  # share of total budget, 0-100
    amount: float
    count: int  # creators the amount pays for
    avg_reward: float
    estimated_reach: int

    def to_dict(self) -> dict:
        return {
            "percentage": self.percentage,
            "amount": self.amount,
            "count": self.count,
            "avgReward": self.avg_reward,
            "estimatedReach": self.estimated_reach,
        }


@dataclass(frozen=True)
class TierAllocations:
    """Allocation across the three creator tiers."""
    micro_influencers: TierAllocation
    mid_tier: TierAllocation
    premium: TierAllocation

    def as_dict(self) -> dict[str, TierAllocation]:
        return {
            "micro_influencers": self.micro_influencers,
            "mid_tier": self.mid_tier,
            "premium": self.premium,
        }

    @property
    def total_amount(self) -> float:
        return sum(tier.amount for tier in self.as_dict().values())

    @property
    def total_creators(self) -> int:
        return sum(tier.count for tier in self.as_dict().values())

    def to_dict(self) -> dict:
        return {
            "microInfluencers": self.micro_influencers.to_dict(),
            "midTier": self.mid_tier.to_dict(),
            "premium": self.premium.to_dict(),
        }


@dataclass(frozen=True)
class ProjectedMetrics:
    """Aggregate outcome of the allocation."""
    total_reach: int
    estimated_engagement: int
    estimated_conversions: int
    estimated_roi: int  # percent
    confidence_score: int

    def to_dict(self) -> dict:
        return {
            "totalReach": self.total_reach,
            "estimatedEngagement": self.estimated_engagement,
            "estimatedConversions": self.estimated_conversions,
            "estimatedROI": self.estimated_roi,
            "confidenceScore": self.confidence_score,
        }


@dataclass(frozen=True)
class RecommendedCriteria:
    """Offer criteria recommended alongside the allocation."""
    min_followers: int
    min_engagement: float
    content_types: tuple[str, ...]
    ideal_timeframe: int

    def to_dict(self) -> dict:
        return {
            "minFollowers": self.min_followers,
            "minEngagement": self.min_engagement,
            "contentTypes": list(self.content_types),
            "idealTimeframe": self.ideal_timeframe,
        }


@dataclass(frozen=True)
class BudgetOptimization:
    """
    Complete result of a budget tier allocation.

    Contains the per-tier split, the projected aggregate metrics and the
    recommended offer criteria.
    """

    total_budget: float
    allocation: TierAllocations
    projected_metrics: ProjectedMetrics
    recommended_criteria: RecommendedCriteria

    @property
    def unallocated_budget(self) -> float:
        """Budget left once whole creators are paid for in every tier."""
        spent = sum(
            tier.count * tier.avg_reward for tier in self.allocation.as_dict().values()
        )
        return self.total_budget - spent

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert the allocation to a DataFrame.

        Returns:
            DataFrame with columns: tier, percentage, amount, count,
            avg_reward, estimated_reach, pct_of_reach
        """
        rows = [
            {
                "tier": name,
                "percentage": tier.percentage,
                "amount": tier.amount,
                "count": tier.count,
                "avg_reward": tier.avg_reward,
                "estimated_reach": tier.estimated_reach,
            }
            for name, tier in self.allocation.as_dict().items()
        ]
        df = pd.DataFrame(rows)

        total_reach = self.projected_metrics.total_reach
        df["pct_of_reach"] = (
            df["estimated_reach"] / total_reach * 100 if total_reach > 0 else 0.0
        )
        return df

    def get_summary_dict(self) -> dict:
        """
        Get a JSON-serializable summary dictionary.

        Useful for export and API responses.
        """
        return {
            "totalBudget": self.total_budget,
            "allocation": self.allocation.to_dict(),
            "projectedMetrics": self.projected_metrics.to_dict(),
            "recommendedCriteria": self.recommended_criteria.to_dict(),
        }

    to_dict = get_summary_dict
