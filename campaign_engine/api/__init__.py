"""
API module for the campaign estimation engine.

- client.py: httpx client for services that call the engine over HTTP
- server.py: FastAPI service wrapping the calculators
"""

from .client import EstimationClient, get_client

__all__ = ["EstimationClient", "get_client"]
