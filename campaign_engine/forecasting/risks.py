"""
Qualitative risk factors, optimisation tips and insights for a forecast.

Nothing here feeds back into the numbers; the forecast calculator attaches
the output to its result for display.
"""

from dataclasses import dataclass, asdict
from enum import Enum

from ..core.parameters import CampaignParameters, ContentType, Industry

# Below this many creators a single weak performer dominates the results
SMALL_CAMPAIGN_CREATORS = 5


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TipImpact(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class RiskFactor:
    """Something that could push results below the forecast."""
    id: str
    name: str
    severity: Severity
    impact: str
    mitigation: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass(frozen=True)
class OptimizationTip:
    """Suggested change to improve a campaign."""
    id: str
    tip: str
    impact: TipImpact
    difficulty: Difficulty

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "tip": self.tip,
            "impact": self.impact.value,
            "difficulty": self.difficulty.value,
        }


@dataclass(frozen=True)
class ForecastInsights:
    """Plain-language context for the industry and content format."""
    industry: str
    content: str

    def to_dict(self) -> dict:
        return asdict(self)


INDUSTRY_INSIGHTS = {
    Industry.RETAIL: "Retail campaigns typically drive good purchase behavior",
    Industry.RESTAURANT: "Food content is highly shareable and engages well",
    Industry.FASHION: "Fashion has high engagement and sharing potential",
    Industry.BEAUTY: "Beauty content drives strong consideration and purchase",
    Industry.TECHNOLOGY: "Tech content attracts high-intent audiences",
    Industry.DEFAULT: "This industry shows average performance patterns",
}

CONTENT_INSIGHTS = {
    ContentType.VIDEO: "Videos typically get 25% more views than images",
    ContentType.IMAGE: "Images are effective for showcasing products clearly",
    ContentType.STORY: "Stories create urgency but have shorter visibility",
}
DEFAULT_CONTENT_INSIGHT = "This content type has average performance"

# TODO: vary tips by content type and industry (a video campaign is still told to add stories)
OPTIMIZATION_TIPS = (
    OptimizationTip(
        id="tip1",
        tip="Add Instagram stories for +15% reach at minimal extra cost",
        impact=TipImpact.MEDIUM,
        difficulty=Difficulty.EASY,
    ),
    OptimizationTip(
        id="tip2",
        tip="Include a time-limited offer to improve conversion rates",
        impact=TipImpact.LARGE,
        difficulty=Difficulty.MEDIUM,
    ),
    OptimizationTip(
        id="tip3",
        tip="Stagger content posting over 3-5 days for sustained visibility",
        impact=TipImpact.MEDIUM,
        difficulty=Difficulty.EASY,
    ),
)


class RiskAndTipGenerator:
    """Build the fixed set of three risks and three tips for a campaign."""

    def generate(
        self, params: CampaignParameters
    ) -> tuple[list[RiskFactor], list[OptimizationTip]]:
        """
        Risk factors and optimisation tips for ``params``.

        Returns
        -------
        tuple[list[RiskFactor], list[OptimizationTip]]
            Always three of each, in a fixed order.
        """
        return self.risk_factors(params), list(OPTIMIZATION_TIPS)

    def risk_factors(self, params: CampaignParameters) -> list[RiskFactor]:
        seasonal_severity = (
            Severity.MEDIUM if params.industry == Industry.FASHION else Severity.LOW
        )
        variance_severity = (
            Severity.HIGH if params.creator_count < SMALL_CAMPAIGN_CREATORS else Severity.MEDIUM
        )

        return [
            RiskFactor(
                id="risk1",
                name="Seasonal variation",
                severity=seasonal_severity,
                impact="Engagement may fluctuate based on seasonal trends and holidays",
                mitigation="Plan campaign timing to align with peak seasonal interest",
            ),
            RiskFactor(
                id="risk2",
                name="Algorithm changes",
                severity=Severity.MEDIUM,
                impact="Platform algorithm updates can affect content visibility",
                mitigation="Use multiple content formats and platforms to diversify",
            ),
            RiskFactor(
                id="risk3",
                name="Influencer performance variance",
                severity=variance_severity,
                impact="Small number of influencers creates higher result variance",
                mitigation="Increase number of influencers to stabilize results",
            ),
        ]

    def insights(self, params: CampaignParameters) -> ForecastInsights:
        """Industry and content insight sentences shown next to the forecast."""
        return ForecastInsights(
            industry=INDUSTRY_INSIGHTS.get(params.industry, INDUSTRY_INSIGHTS[Industry.DEFAULT]),
            content=CONTENT_INSIGHTS.get(params.content_type, DEFAULT_CONTENT_INSIGHT),
        )
