"""
FastAPI service exposing the estimation engine to the display layer.

Provides endpoints for:
- Campaign forecasts (campaign wizard)
- Budget tier allocation (budget planning panel)
- Match-quality badges and ranking (marketplace)

The calculators are pure and fast, so every request is answered inline;
there is no job queue.
"""

import os
import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from campaign_engine import __version__
from campaign_engine.config import ConfigLoader, EngineConfig, default_config
from campaign_engine.core import CampaignParameters, InvalidParameterError, OfferCriteria
from campaign_engine.forecasting import ForecastCalculator
from campaign_engine.matching import MatchQualityClassifier
from campaign_engine.optimization import BudgetTierAllocator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CAMPAIGN_ENGINE_CONFIG"

# ============================================================================
# Pydantic Models for API
# ============================================================================

class CamelModel(BaseModel):
    """Accepts camelCase (wire) or snake_case field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ForecastRequest(CamelModel):
    """Campaign parameters as entered in the campaign wizard."""
    budget_per_creator: float
    creator_count: int
    average_followers: int
    average_engagement_percent: float
    campaign_duration_days: int
    content_type: str = "image"
    industry: Optional[str] = None

    def to_parameters(self) -> CampaignParameters:
        return CampaignParameters(**self.model_dump())


class CriteriaModel(CamelModel):
    """Criteria of the offer the budget is planned for."""
    min_followers: int
    min_engagement: float
    content_type: str
    timeframe: int


class BudgetRequest(CamelModel):
    """Request body for a budget allocation."""
    total_budget: float
    criteria: CriteriaModel


class RankRequest(BaseModel):
    """Creator id -> match score."""
    scores: Dict[str, float] = Field(..., description="Match score per creator id")


# ============================================================================
# App factory
# ============================================================================

def load_engine_config() -> EngineConfig:
    """Configuration from the YAML file named by CAMPAIGN_ENGINE_CONFIG, else defaults."""
    path = os.getenv(CONFIG_ENV_VAR)
    if path:
        return ConfigLoader.from_yaml(path)
    return default_config()


def _bad_request(error: InvalidParameterError) -> HTTPException:
    logger.info(f"Rejected request: {error}")
    return HTTPException(status_code=400, detail=error.errors)


def create_app(config: Optional[EngineConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    config : EngineConfig, optional
        Engine configuration. Loaded via ``load_engine_config`` when omitted.
    """
    config = config or load_engine_config()
    forecaster = ForecastCalculator(config)
    allocator = BudgetTierAllocator(config)
    classifier = MatchQualityClassifier(config)

    app = FastAPI(
        title="Campaign Estimation Engine",
        description="Forecasts, budget allocation and match quality for influencer campaigns",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ========================================================================
    # API Endpoints
    # ========================================================================

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": "Campaign Estimation Engine",
            "version": __version__,
        }

    @app.get("/health")
    async def health():
        """Detailed health check."""
        return {
            "status": "healthy",
            "config": config.name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/config")
    async def get_config():
        """Active configuration tables."""
        return ConfigLoader.to_dict(config)

    @app.post("/forecast")
    async def forecast(request: ForecastRequest):
        """Three-point campaign forecast."""
        try:
            result = forecaster.forecast(request.to_parameters())
        except InvalidParameterError as e:
            raise _bad_request(e)
        return result.to_dict()

    @app.post("/budget/optimize")
    async def optimize_budget(request: BudgetRequest):
        """Split a budget across creator tiers."""
        criteria = OfferCriteria(**request.criteria.model_dump())
        try:
            result = allocator.allocate(request.total_budget, criteria)
        except InvalidParameterError as e:
            raise _bad_request(e)
        return result.to_dict()

    @app.get("/match/classify")
    async def classify_match(score: float = Query(..., description="Upstream match score")):
        """Quality badge for one match score."""
        try:
            quality = classifier.classify(score)
        except InvalidParameterError as e:
            raise _bad_request(e)
        return quality.to_dict()

    @app.post("/match/rank")
    async def rank_matches(request: RankRequest):
        """Creators ordered by match score, each with its badge."""
        try:
            ranked = classifier.rank(request.scores)
        except InvalidParameterError as e:
            raise _bad_request(e)
        return {"matches": [match.to_dict() for match in ranked]}

    return app


app = create_app()


# ============================================================================
# Run with: uvicorn campaign_engine.api.server:app --host 0.0.0.0 --port 8000
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
