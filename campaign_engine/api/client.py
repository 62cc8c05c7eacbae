"""
Client for the estimation engine HTTP service.

Used by front-end services that do not embed the engine in-process.
"""

import os
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from campaign_engine.core import CampaignParameters, InvalidParameterError, OfferCriteria

logger = logging.getLogger(__name__)

API_URL_ENV_VAR = "CAMPAIGN_ENGINE_API_URL"


class EstimationClient:
    """
    Client for the Campaign Estimation Engine API.

    Usage:
        with EstimationClient("http://localhost:8000") as client:
            forecast = client.forecast(params)
            print(forecast["reach"]["expected"])

    Results come back as the plain dictionaries the service returns, with
    the display layer's camelCase field names.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Parameters
        ----------
        base_url : str, optional
            Base URL of the API. Defaults to CAMPAIGN_ENGINE_API_URL env var or localhost.
        timeout : float
            Request timeout in seconds.
        transport : httpx.BaseTransport, optional
            Custom transport (e.g. for tests).
        """
        self.base_url = base_url or os.getenv(API_URL_ENV_VAR, "http://localhost:8000")
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self._client.close()

    def close(self):
        """Close the client."""
        self._client.close()

    def health_check(self) -> bool:
        """
        Check if the API is healthy.

        Returns
        -------
        bool
            True if healthy, False otherwise.
        """
        try:
            response = self._client.get("/health")
            return response.status_code == 200
        except httpx.HTTPError as e:
            logger.warning(f"Health check failed: {e}")
            return False

    def forecast(self, params: CampaignParameters) -> Dict[str, Any]:
        """
        Request a campaign forecast.

        Raises
        ------
        InvalidParameterError
            If the service rejects the parameters.
        httpx.HTTPStatusError
            For any other non-success response.
        """
        response = self._client.post("/forecast", json=params.to_dict())
        return self._handle(response)

    def optimize_budget(self, total_budget: float, criteria: OfferCriteria) -> Dict[str, Any]:
        """Request a budget tier allocation."""
        response = self._client.post(
            "/budget/optimize",
            json={"totalBudget": total_budget, "criteria": criteria.to_dict()},
        )
        return self._handle(response)

    def classify_match(self, match_score: float) -> Dict[str, Any]:
        """Request the quality badge for a match score."""
        response = self._client.get("/match/classify", params={"score": match_score})
        return self._handle(response)

    def rank_matches(self, scores: Mapping[str, float]) -> list[Dict[str, Any]]:
        """Rank creators by match score."""
        response = self._client.post("/match/rank", json={"scores": dict(scores)})
        return self._handle(response)["matches"]

    @staticmethod
    def _handle(response: httpx.Response) -> Dict[str, Any]:
        if response.status_code == 400:
            detail = response.json().get("detail", [])
            raise InvalidParameterError(detail if detail else "Request rejected")
        response.raise_for_status()
        return response.json()


# Convenience function
def get_client(base_url: Optional[str] = None) -> EstimationClient:
    """
    Get a client instance.

    Parameters
    ----------
    base_url : str, optional
        API URL. Uses CAMPAIGN_ENGINE_API_URL env var if not provided.

    Returns
    -------
    EstimationClient
        Client instance.
    """
    return EstimationClient(base_url)
