# app/routes/facebook.py

import logging
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, constr
from app.core.config import settings
from app.core.limiter import limiter
from app.deps.facebook import get_bearer_token, get_facebook_gateway
from app.services.facebook import FacebookGateway

router = APIRouter()
logger = logging.getLogger(__name__)

class TokenExchangeRequest(BaseModel):
    accessToken: constr(min_length=1)

@router.post("/exchange-token")
@limiter.limit(settings.RATE_LIMIT_EXCHANGE_TOKEN)
async def exchange_token(
    request: Request,
    data: TokenExchangeRequest,
    gateway: FacebookGateway = Depends(get_facebook_gateway),
):
    """
    Exchanges a short-lived Facebook user token for a long-lived one.

    Returns:
        JSON: { accessToken, expiresIn }
    """
    return await gateway.exchange_token(data.accessToken)

@router.get("/user")
@limiter.limit(settings.RATE_LIMIT_GRAPH_READ)
async def get_user(
    request: Request,
    token: str = Depends(get_bearer_token),
    gateway: FacebookGateway = Depends(get_facebook_gateway),
):
    """Returns { id, name, email, picture } for the token's owner."""
    return await gateway.get_user_profile(token)

@router.get("/pages")
@limiter.limit(settings.RATE_LIMIT_GRAPH_READ)
async def get_pages(
    request: Request,
    token: str = Depends(get_bearer_token),
    gateway: FacebookGateway = Depends(get_facebook_gateway),
):
    """Returns { pages: [{ id, name, accessToken, category }] }."""
    pages = await gateway.list_pages(token)
    logger.info(f"Listed {len(pages)} Facebook page(s)")
    return {"pages": pages}

"""
--------------------------------------------------------------------
Purpose:
    Facebook login helpers for the frontend: long-lived token exchange,
    profile lookup, and the list of pages the user can broadcast to.

What It Does:
    - POST /exchange-token  (body: accessToken)
    - GET  /user            (Authorization: Bearer <user token>)
    - GET  /pages           (Authorization: Bearer <user token>)

Used By:
    - Frontend "Connect Facebook" flow, before creating a live video.

Good Practice:
    - Validation (400) and auth (401) failures never reach Facebook.
    - Facebook errors are translated in the gateway, not here.

--------------------------------------------------------------------
"""
