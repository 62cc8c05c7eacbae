"""
Demo scenario for the estimation engine.

Builds a small, fixed set of requests (the campaign wizard's video/fashion
example, a budget planning run and a marketplace listing) and runs them
through every calculator, so the outputs can be inspected without a running
service.

Usage:
    from campaign_engine.analysis.demo import create_demo_scenario

    demo = create_demo_scenario()
    demo.print_all_summaries()
    dfs = demo.get_all_dataframes()
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from ..config.schema import EngineConfig, default_config
from ..core.parameters import CampaignParameters, OfferCriteria
from ..forecasting.forecast_engine import CampaignForecast, ForecastCalculator
from ..matching.quality import MatchQualityClassifier, RankedMatch
from ..optimization.allocator import BudgetTierAllocator
from ..optimization.results import BudgetOptimization
from .reporting import summarize_budget, summarize_forecast

# Offer draft as saved by the campaign wizard
DEMO_OFFER = {
    "reward": "$500",
    "postsRequired": 3,
    "minFollowers": 10000,
    "minEngagement": 4,
    "timeframe": 14,
    "contentType": "video",
    "category": "fashion",
}

DEMO_BUDGET = 1000.0

DEMO_MATCH_SCORES = {
    "emma_styles": 92,
    "sophie_eats": 85,
    "olivia_fit": 81,
    "mia_travels": 70,
    "ava_beauty": 69.5,
    "lily_home": 48,
}


@dataclass
class DemoScenario:
    """Container for all demo inputs and results."""

    # Inputs
    parameters: CampaignParameters
    criteria: OfferCriteria
    total_budget: float
    match_scores: Dict[str, float]

    # Results
    forecast: CampaignForecast
    optimization: BudgetOptimization
    ranked_matches: List[RankedMatch]

    def print_all_summaries(self):
        """Print all result summaries."""
        print("\n" + "=" * 80)
        print("DEMO: CAMPAIGN FORECAST")
        print("=" * 80)
        print(summarize_forecast(self.forecast))

        print("\n" + "=" * 80)
        print("DEMO: BUDGET ALLOCATION")
        print("=" * 80)
        print(summarize_budget(self.optimization))

        print("\n" + "=" * 80)
        print("DEMO: MARKETPLACE RANKING")
        print("=" * 80)
        for position, match in enumerate(self.ranked_matches, start=1):
            marker = "*" if match.quality.highlighted else " "
            print(
                f"{position:>3}. {marker} {match.creator_id:<16} {match.match_score:>5}  "
                f"{match.quality.label:<16} {match.quality.rating}"
            )

    def get_all_dataframes(self) -> Dict[str, pd.DataFrame]:
        """Get all results as DataFrames."""
        ranking = pd.DataFrame(
            [
                {
                    "creator_id": match.creator_id,
                    "match_score": match.match_score,
                    "label": match.quality.label,
                    "rating": match.quality.rating,
                    "highlighted": match.quality.highlighted,
                }
                for match in self.ranked_matches
            ],
            columns=["creator_id", "match_score", "label", "rating", "highlighted"],
        )
        return {
            "forecast": self.forecast.to_dataframe(),
            "budget_allocation": self.optimization.to_dataframe(),
            "match_ranking": ranking,
        }


def create_demo_scenario(
    config: Optional[EngineConfig] = None,
    total_budget: float = DEMO_BUDGET,
) -> DemoScenario:
    """
    Run the demo requests through every calculator.

    Parameters
    ----------
    config : EngineConfig, optional
        Engine configuration. Defaults to the shared default configuration.
    total_budget : float
        Budget handed to the tier allocator.

    Returns
    -------
    DemoScenario
        Inputs and results, ready to print or tabulate.
    """
    config = config or default_config()

    parameters = CampaignParameters.from_offer(DEMO_OFFER)
    criteria = OfferCriteria.from_offer(DEMO_OFFER)

    forecast = ForecastCalculator(config).forecast(parameters)
    optimization = BudgetTierAllocator(config).allocate(total_budget, criteria)
    ranked = MatchQualityClassifier(config).rank(DEMO_MATCH_SCORES)

    return DemoScenario(
        parameters=parameters,
        criteria=criteria,
        total_budget=total_budget,
        match_scores=dict(DEMO_MATCH_SCORES),
        forecast=forecast,
        optimization=optimization,
        ranked_matches=ranked,
    )


def run_full_demo(config: Optional[EngineConfig] = None) -> DemoScenario:
    """Run the complete demo and print every table."""
    demo = create_demo_scenario(config)

    print("\n" + "=" * 80)
    print("CAMPAIGN ESTIMATION ENGINE DEMO")
    print("=" * 80)

    demo.print_all_summaries()

    dfs = demo.get_all_dataframes()
    print("\n" + "=" * 80)
    print("AVAILABLE DATAFRAMES")
    print("=" * 80)
    for name, df in dfs.items():
        print(f"\n{name}: {df.shape[0]} rows x {df.shape[1]} columns")
        print(df.to_string(index=False))

    return demo
