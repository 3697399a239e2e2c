# app/services/facebook.py

import logging
from typing import Any, Dict, List

from app.core.config import Settings
from app.core.errors import ConfigurationError, GraphAPIError, ValidationError, translate_graph_error
from app.services.graph_api import GraphTransport

logger = logging.getLogger(__name__)

USER_FIELDS = "id,name,email,picture"
PAGE_FIELDS = "id,name,access_token,category"


class FacebookGateway:
    """Token exchange, profile lookup and page listing against the Graph API."""

    def __init__(self, settings: Settings, transport: GraphTransport):
        self.settings = settings
        self.transport = transport

    async def exchange_token(self, access_token: str) -> Dict[str, Any]:
        """
        Exchanges a short-lived user token for a long-lived one.
        Returns {"accessToken", "expiresIn"} as given by Facebook.
        """
        if not access_token:
            raise ValidationError(
                "Access token is required",
                details=[{"field": "accessToken", "message": "Access token is required", "type": "missing"}],
            )

        app_id = self.settings.FACEBOOK_APP_ID
        app_secret = self.settings.FACEBOOK_APP_SECRET
        if not app_id or not app_secret:
            logger.error("Token exchange requested but Facebook app credentials are not configured.")
            raise ConfigurationError("Facebook app credentials not configured")

        label = "Token exchange failed"
        try:
            data = await self.transport.send(
                "GET",
                "oauth/access_token",
                params={
                    "grant_type": "fb_exchange_token",
                    "client_id": app_id,
                    "client_secret": app_secret,
                    "fb_exchange_token": access_token,
                },
            )
        except GraphAPIError as e:
            logger.error(f"Token exchange error: {e.payload or e}")
            raise translate_graph_error(e, label) from e

        logger.info("Exchanged short-lived token for long-lived token.")
        return {
            "accessToken": data.get("access_token"),
            "expiresIn": data.get("expires_in"),
        }

    async def get_user_profile(self, bearer_token: str) -> Dict[str, Any]:
        label = "Failed to get user information"
        try:
            data = await self.transport.send(
                "GET", "me", params={"fields": USER_FIELDS}, bearer_token=bearer_token
            )
        except GraphAPIError as e:
            logger.error(f"Get user info error: {e.payload or e}")
            raise translate_graph_error(e, label) from e

        # Some profiles have no public email or picture
        picture = ((data.get("picture") or {}).get("data") or {}).get("url") or ""
        return {
            "id": data.get("id"),
            "name": data.get("name"),
            "email": data.get("email") or "",
            "picture": picture,
        }

    async def list_pages(self, bearer_token: str) -> List[Dict[str, Any]]:
        """Pages the user manages, in Graph API order. No pages is not an error."""
        label = "Failed to get pages"
        try:
            data = await self.transport.send(
                "GET", "me/accounts", params={"fields": PAGE_FIELDS}, bearer_token=bearer_token
            )
        except GraphAPIError as e:
            logger.error(f"Get pages error: {e.payload or e}")
            raise translate_graph_error(e, label) from e

        return [
            {
                "id": page.get("id"),
                "name": page.get("name"),
                "accessToken": page.get("access_token"),
                "category": page.get("category"),
            }
            for page in data.get("data") or []
        ]
