"""
Global pytest fixtures for Campaign Estimation Engine tests.
"""
import pytest
import numpy as np

from campaign_engine.config.schema import EngineConfig, default_config
from campaign_engine.core.parameters import CampaignParameters, ContentType, Industry, OfferCriteria
from campaign_engine.forecasting.forecast_engine import ForecastCalculator
from campaign_engine.matching.quality import MatchQualityClassifier
from campaign_engine.optimization.allocator import BudgetTierAllocator


# =============================================================================
# Sample Parameters
# =============================================================================

@pytest.fixture
def video_fashion_params() -> CampaignParameters:
    """The campaign wizard's worked example: 3 fashion creators posting video."""
    return CampaignParameters(
        budget_per_creator=500,
        creator_count=3,
        average_followers=10000,
        average_engagement_percent=4,
        campaign_duration_days=14,
        content_type=ContentType.VIDEO,
        industry=Industry.FASHION,
    )


@pytest.fixture
def profitable_params() -> CampaignParameters:
    """Large technology campaign with a positive expected ROI."""
    return CampaignParameters(
        budget_per_creator=200,
        creator_count=10,
        average_followers=100000,
        average_engagement_percent=6,
        campaign_duration_days=30,
        content_type=ContentType.VIDEO,
        industry=Industry.TECHNOLOGY,
    )


@pytest.fixture
def small_criteria() -> OfferCriteria:
    """Offer criteria below every recommendation floor."""
    return OfferCriteria(min_followers=2000, min_engagement=2, content_type="image", timeframe=7)


@pytest.fixture
def large_criteria() -> OfferCriteria:
    """Offer criteria above every recommendation floor."""
    return OfferCriteria(min_followers=20000, min_engagement=5, content_type="video", timeframe=30)


# =============================================================================
# Calculators
# =============================================================================

@pytest.fixture
def engine_config() -> EngineConfig:
    return default_config()


@pytest.fixture
def calculator(engine_config) -> ForecastCalculator:
    return ForecastCalculator(engine_config)


@pytest.fixture
def allocator(engine_config) -> BudgetTierAllocator:
    return BudgetTierAllocator(engine_config)


@pytest.fixture
def classifier(engine_config) -> MatchQualityClassifier:
    return MatchQualityClassifier(engine_config)


# =============================================================================
# Randomised inputs
# =============================================================================

@pytest.fixture
def random_params() -> list[CampaignParameters]:
    """200 valid parameter sets drawn with a fixed seed."""
    rng = np.random.default_rng(42)
    content_types = list(ContentType)
    industries = list(Industry)

    params = []
    for _ in range(200):
        params.append(CampaignParameters(
            budget_per_creator=float(rng.uniform(10, 5000)),
            creator_count=int(rng.integers(1, 50)),
            average_followers=int(rng.integers(0, 2_000_000)),
            average_engagement_percent=float(rng.uniform(0, 100)),
            campaign_duration_days=int(rng.integers(1, 120)),
            content_type=content_types[int(rng.integers(len(content_types)))],
            industry=industries[int(rng.integers(len(industries)))],
        ))
    return params


@pytest.fixture
def random_budgets() -> list[float]:
    """Budgets from a few dollars up to a large campaign."""
    rng = np.random.default_rng(7)
    return [float(b) for b in rng.uniform(1, 250_000, size=200)]
