"""
Tests for api/server.py and api/client.py - HTTP service and client.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from campaign_engine.api.client import EstimationClient
from campaign_engine.api.server import create_app
from campaign_engine.config.schema import default_config
from campaign_engine.core.exceptions import InvalidParameterError
from campaign_engine.core.parameters import OfferCriteria


FORECAST_BODY = {
    "budgetPerCreator": 500,
    "creatorCount": 3,
    "averageFollowers": 10000,
    "averageEngagementPercent": 4,
    "campaignDurationDays": 14,
    "contentType": "video",
    "industry": "fashion",
}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_client():
    return TestClient(create_app(default_config()))


@pytest.fixture
def estimation_client(test_client):
    """EstimationClient whose requests are served in-process by the app."""

    def forward(request: httpx.Request) -> httpx.Response:
        headers = {}
        if "content-type" in request.headers:
            headers["content-type"] = request.headers["content-type"]
        response = test_client.request(
            request.method,
            request.url.path,
            params=request.url.params,
            content=request.content,
            headers=headers,
        )
        return httpx.Response(response.status_code, content=response.content, headers=response.headers)

    client = EstimationClient("http://testserver", transport=httpx.MockTransport(forward))
    yield client
    client.close()


# =============================================================================
# Server
# =============================================================================

class TestServer:
    """Endpoint behaviour."""

    def test_root(self, test_client):
        response = test_client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health(self, test_client):
        data = test_client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["config"] == "default"

    def test_config(self, test_client):
        data = test_client.get("/config").json()
        assert data["budget"]["confidence_score"] == 80

    def test_forecast(self, test_client):
        response = test_client.post("/forecast", json=FORECAST_BODY)
        assert response.status_code == 200
        data = response.json()
        assert data["reach"]["expected"] == 22500
        assert data["roi"]["percentage"] == {"lower": 0, "expected": -91, "upper": -164, "trend": "up"}
        assert data["confidence"] == 82

    def test_forecast_accepts_snake_case(self, test_client):
        body = {
            "budget_per_creator": 500,
            "creator_count": 3,
            "average_followers": 10000,
            "average_engagement_percent": 4,
            "campaign_duration_days": 14,
        }
        assert test_client.post("/forecast", json=body).status_code == 200

    def test_forecast_invalid_parameters(self, test_client):
        body = dict(FORECAST_BODY, creatorCount=0, campaignDurationDays=0)
        response = test_client.post("/forecast", json=body)
        assert response.status_code == 400
        assert len(response.json()["detail"]) == 2

    def test_forecast_zero_cost(self, test_client):
        response = test_client.post("/forecast", json=dict(FORECAST_BODY, budgetPerCreator=0))
        assert response.status_code == 400

    def test_forecast_unknown_content_type(self, test_client):
        response = test_client.post("/forecast", json=dict(FORECAST_BODY, contentType="reel"))
        assert response.status_code == 400

    def test_forecast_malformed_body(self, test_client):
        response = test_client.post("/forecast", json={"budgetPerCreator": 500})
        assert response.status_code == 422

    def test_optimize_budget(self, test_client):
        body = {
            "totalBudget": 1000,
            "criteria": {"minFollowers": 2000, "minEngagement": 2, "contentType": "image", "timeframe": 7},
        }
        data = test_client.post("/budget/optimize", json=body).json()
        assert data["allocation"]["midTier"]["count"] == 1
        assert data["projectedMetrics"]["estimatedROI"] == 77

    def test_optimize_budget_zero(self, test_client):
        body = {
            "totalBudget": 0,
            "criteria": {"minFollowers": 2000, "minEngagement": 2, "contentType": "image", "timeframe": 7},
        }
        assert test_client.post("/budget/optimize", json=body).status_code == 400

    def test_classify(self, test_client):
        data = test_client.get("/match/classify", params={"score": 84.999}).json()
        assert data["label"] == "Great Match"
        assert data["tierIndex"] == 1

    def test_rank(self, test_client):
        response = test_client.post("/match/rank", json={"scores": {"a": 50, "b": 90}})
        matches = response.json()["matches"]
        assert [m["creatorId"] for m in matches] == ["b", "a"]


# =============================================================================
# Client
# =============================================================================

class TestEstimationClient:
    """Client calls round-trip through the app."""

    def test_health_check(self, estimation_client):
        assert estimation_client.health_check() is True

    def test_health_check_unreachable(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with EstimationClient("http://nowhere", transport=httpx.MockTransport(refuse)) as client:
            assert client.health_check() is False

    def test_forecast(self, estimation_client, video_fashion_params):
        data = estimation_client.forecast(video_fashion_params)
        assert data["reach"]["expected"] == 22500

    def test_optimize_budget(self, estimation_client, small_criteria):
        data = estimation_client.optimize_budget(1000, small_criteria)
        assert data["projectedMetrics"]["totalReach"] == 46000

    def test_classify_match(self, estimation_client):
        assert estimation_client.classify_match(85)["label"] == "Best Match"

    def test_rank_matches(self, estimation_client):
        matches = estimation_client.rank_matches({"x": 10, "y": 75})
        assert matches[0]["creatorId"] == "y"

    def test_rejected_request_raises(self, estimation_client):
        with pytest.raises(InvalidParameterError):
            estimation_client.optimize_budget(
                -5,
                OfferCriteria(min_followers=0, min_engagement=0, content_type="image", timeframe=0),
            )

    def test_base_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("CAMPAIGN_ENGINE_API_URL", "http://engine.internal:9000")
        with EstimationClient() as client:
            assert client.base_url == "http://engine.internal:9000"
