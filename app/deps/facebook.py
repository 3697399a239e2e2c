# app/deps/facebook.py

from typing import Optional

from fastapi import Depends, Header

from app.core.config import Settings, get_settings
from app.core.errors import UnauthorizedError
from app.services.facebook import FacebookGateway
from app.services.graph_api import GraphTransport, HttpxGraphTransport
from app.services.live_video import LiveVideoGateway
from app.utils.validators import parse_bearer_token


def get_graph_transport(settings: Settings = Depends(get_settings)) -> GraphTransport:
    """Outbound Graph API client. Overridden with a fake in tests."""
    return HttpxGraphTransport(settings.FACEBOOK_GRAPH_API_URL)


def get_facebook_gateway(
    settings: Settings = Depends(get_settings),
    transport: GraphTransport = Depends(get_graph_transport),
) -> FacebookGateway:
    return FacebookGateway(settings, transport)


def get_live_video_gateway(transport: GraphTransport = Depends(get_graph_transport)) -> LiveVideoGateway:
    return LiveVideoGateway(transport)


async def get_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    """
    FastAPI dependency for the Facebook user token.
    - Expects: 'Authorization: Bearer <token>'
    - Raises UnauthorizedError (401) for a missing or malformed header,
      before any Graph API call is made.
    """
    token = parse_bearer_token(authorization)
    if token is None:
        raise UnauthorizedError()
    return token

"""
------------------------------------------------
✅ Purpose:
Wires configuration and the outbound transport into the gateways per request.

🔍 What It Does:
- Builds FacebookGateway / LiveVideoGateway from injected Settings and
  GraphTransport.
- Extracts the user's bearer token from the Authorization header.

📌 Used by:
- `app/routes/facebook.py` and `app/routes/live_video.py` via `Depends(...)`.
- Tests: `app.dependency_overrides[get_graph_transport] = lambda: fake`.

🔐 Security:
- The bearer token is only forwarded to Facebook; it is never stored or logged.
------------------------------------------------
"""
