# app/services/live_video.py

import logging
from typing import Any, Dict

from app.core.errors import (
    GraphAPIError,
    MissingParameterError,
    UpstreamContractViolation,
    ValidationError,
    translate_graph_error,
)
from app.services.graph_api import GraphTransport
from app.utils.stream_url import split_stream_url

logger = logging.getLogger(__name__)

LIVE_VIDEO_FIELDS = "id,status,stream_url,secure_stream_url,title,description,permalink_url,embed_html"
END_MESSAGE = "Live video ended successfully"


class LiveVideoGateway:
    """Create, inspect and end a live broadcast on a Facebook page."""

    def __init__(self, transport: GraphTransport):
        self.transport = transport

    async def create_live_video(
        self, page_id: str, title: str, description: str, page_access_token: str
    ) -> Dict[str, Any]:
        """
        Starts a LIVE_NOW broadcast and returns the RTMPS base URL and stream key
        the encoder (OBS etc.) needs.
        """
        required = (
            ("pageId", page_id, "Page ID is required"),
            ("title", title, "Title is required"),
            ("pageAccessToken", page_access_token, "Page access token is required"),
        )
        details = [
            {"field": field, "message": message, "type": "missing"}
            for field, value, message in required
            if not value
        ]
        if details:
            raise ValidationError(details[0]["message"], details=details)

        description = description or ""
        label = "Failed to create live video"
        try:
            live_video = await self.transport.send(
                "POST",
                f"{page_id}/live_videos",
                json={
                    "title": title,
                    "description": description,
                    "status": "LIVE_NOW",
                    "access_token": page_access_token,
                },
            )
        except GraphAPIError as e:
            logger.error(f"Create live video error: {e.payload or e}")
            raise translate_graph_error(e, label) from e

        secure_stream_url = live_video.get("secure_stream_url")
        if not secure_stream_url:
            logger.error(f"Create live video error: no secure_stream_url for video {live_video.get('id')}")
            raise UpstreamContractViolation("No secure stream URL returned from Facebook", error=label)

        try:
            stream_url, stream_key = split_stream_url(secure_stream_url)
        except ValueError as e:
            logger.error(f"Create live video error: unusable secure_stream_url for video {live_video.get('id')}")
            raise UpstreamContractViolation("Secure stream URL returned from Facebook has no stream key", error=label) from e

        logger.info(f"Live video {live_video.get('id')} created on page {page_id}")
        return {
            "id": live_video.get("id"),
            "streamUrl": stream_url,
            "streamKey": stream_key,
            "title": title,
            "description": description,
            "permalinkUrl": live_video.get("permalink_url"),
            "embedHtml": live_video.get("embed_html"),
        }

    async def get_live_video_status(self, video_id: str, page_access_token: str) -> Dict[str, Any]:
        if not page_access_token:
            raise MissingParameterError("pageAccessToken")

        try:
            return await self.transport.send(
                "GET",
                video_id,
                params={"fields": LIVE_VIDEO_FIELDS, "access_token": page_access_token},
            )
        except GraphAPIError as e:
            logger.error(f"Get live video error: {e.payload or e}")
            raise translate_graph_error(e, "Failed to get live video") from e

    async def end_live_video(self, video_id: str, page_access_token: str) -> Dict[str, Any]:
        if not page_access_token:
            raise MissingParameterError("pageAccessToken")

        try:
            data = await self.transport.send(
                "POST",
                video_id,
                json={"end_live_video": True, "access_token": page_access_token},
            )
        except GraphAPIError as e:
            logger.error(f"End live video error: {e.payload or e}")
            raise translate_graph_error(e, "Failed to end live video") from e

        logger.info(f"Live video {video_id} ended")
        return {"success": True, "message": END_MESSAGE, "data": data}

"""
--------------------------------------------------------------
Purpose:
    Live-video lifecycle on Facebook pages, always with a page access token.

What It Does:
    - create: POST /{page_id}/live_videos (status LIVE_NOW), then splits
      secure_stream_url into streamUrl + streamKey.
    - status: GET /{video_id}, returned as Facebook sends it.
    - end: POST /{video_id} with end_live_video=true.

Used By:
    - `app/routes/live_video.py`

Good Practices:
    - A 200 without secure_stream_url is reported as a failure; never hand
      the caller a half-filled result without a streamKey.
    - Page tokens go in the body/query as `access_token`, never logged.

--------------------------------------------------------------
"""
