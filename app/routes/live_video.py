# app/routes/live_video.py

import logging
from typing import Optional
from fastapi import APIRouter, Body, Depends, Query, Request
from pydantic import BaseModel, constr
from app.core.config import settings
from app.core.limiter import limiter
from app.deps.facebook import get_live_video_gateway
from app.services.live_video import LiveVideoGateway

router = APIRouter()
logger = logging.getLogger(__name__)

class LiveVideoCreateRequest(BaseModel):
    pageId: constr(min_length=1)
    title: constr(min_length=1)
    description: Optional[str] = ""
    pageAccessToken: constr(min_length=1)

class LiveVideoEndRequest(BaseModel):
    pageAccessToken: Optional[str] = None

@router.post("/live-video")
@limiter.limit(settings.RATE_LIMIT_LIVE_VIDEO)
async def create_live_video(
    request: Request,
    data: LiveVideoCreateRequest,
    gateway: LiveVideoGateway = Depends(get_live_video_gateway),
):
    """
    Creates a live video on a Facebook page.

    Returns:
        JSON: { id, streamUrl, streamKey, title, description, permalinkUrl, embedHtml }
    """
    return await gateway.create_live_video(
        data.pageId, data.title, data.description or "", data.pageAccessToken
    )

@router.get("/live-video/{video_id}")
@limiter.limit(settings.RATE_LIMIT_GRAPH_READ)
async def get_live_video(
    request: Request,
    video_id: str,
    page_access_token: Optional[str] = Query(None, alias="pageAccessToken"),
    gateway: LiveVideoGateway = Depends(get_live_video_gateway),
):
    """Live video status, exactly as Facebook reports it."""
    return await gateway.get_live_video_status(video_id, page_access_token)

@router.post("/live-video/{video_id}/end")
@limiter.limit(settings.RATE_LIMIT_LIVE_VIDEO)
async def end_live_video(
    request: Request,
    video_id: str,
    data: Optional[LiveVideoEndRequest] = Body(None),
    gateway: LiveVideoGateway = Depends(get_live_video_gateway),
):
    """Ends a live broadcast. Returns { success, message, data }."""
    token = data.pageAccessToken if data else None
    return await gateway.end_live_video(video_id, token)
