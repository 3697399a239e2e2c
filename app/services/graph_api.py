# app/services/graph_api.py

import logging
from typing import Any, Dict, Optional, Protocol

import httpx

from app.core.errors import GraphAPIError

logger = logging.getLogger(__name__)


class GraphTransport(Protocol):
    """Sends one request to the Graph API and returns the decoded JSON body."""

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        bearer_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        ...


class HttpxGraphTransport:
    """
    GraphTransport backed by httpx.AsyncClient.
    One client per request; timeouts are httpx defaults.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self._transport = transport  # httpx.MockTransport in tests

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        bearer_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = {"Authorization": f"Bearer {bearer_token}"} if bearer_token else None

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(method, url, params=params, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Graph API {method} /{path.lstrip('/')} unreachable: {e}")
            raise GraphAPIError(f"Graph API request failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            raise GraphAPIError(
                f"Graph API returned {response.status_code}",
                payload=body if isinstance(body, dict) else None,
                status_code=response.status_code,
            )

        if not isinstance(body, dict):
            raise GraphAPIError(
                f"Graph API returned a non-object body ({response.status_code})",
                status_code=response.status_code,
            )

        return body

"""
--------------------------------------------------------------
Purpose:
    Single seam between the gateways and the network.

What It Does:
    - `GraphTransport` is the protocol the gateways depend on.
    - `HttpxGraphTransport` issues the request with httpx, decodes JSON, and
      turns non-2xx answers and connection failures into `GraphAPIError`.
    - User tokens go in the Authorization header (`bearer_token`);
      page tokens and exchange parameters are passed by the caller in
      `params` / `json`.

Used By:
    - `app/deps/facebook.py` builds one per request from settings.
    - Tests swap it for a fake through `app.dependency_overrides`.

Good Practices:
    - No retries here; a failed call surfaces immediately.
    - Never log query strings: they carry access tokens and the app secret.

--------------------------------------------------------------
"""
