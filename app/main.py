# app/main.py

"""
main.py — LiveCast Backend

Purpose:
    FastAPI entrypoint for the LiveCast Facebook Live gateway.
    Configures CORS, rate limiting, logging, error handlers, and loads all routers.

What It Does:
    - Initializes FastAPI app.
    - Attaches middleware for CORS and rate limiting.
    - Converts every GatewayError into {"error", "message"} JSON.
    - Registers the Facebook, live-video and health routers.

Used By:
    - uvicorn app.main:app --reload (development)
    - Production deployments on Railway, Docker, etc.

--------------------------------------------------------------------
"""

from app.core.logging import init_logging
init_logging()

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import settings
from app.core.errors import GatewayError, ValidationError
from app.core.limiter import limiter
from app.utils.validators import describe_validation_errors

# === Import Routers ===
from app.routes.facebook import router as facebook_router
from app.routes.live_video import router as live_video_router
from app.routes.health import router as health_router

logger = logging.getLogger(__name__)

# === FastAPI App Initialization ===
app = FastAPI(
    title="LiveCast Backend",
    description="Facebook Graph API gateway for token exchange, pages and live video.",
    version=settings.APP_VERSION,
)

# === Rate Limiting Middleware ===
app.state.limiter = limiter

@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Handles requests exceeding rate limits."""
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests", "message": "Too many requests. Please slow down."},
    )

app.add_middleware(SlowAPIMiddleware)

# === CORS Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],  # Only allow from frontend
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# === Error Handlers ===

@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    """Validation, auth, configuration and Facebook errors."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code} {exc.error}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Pydantic validation failures become 400 with field-level details."""
    details = describe_validation_errors(exc.errors())
    message = details[0]["message"] if details else "Invalid request data"
    error = ValidationError(message, details=details)
    return await gateway_error_handler(request, error)

@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all, never leaks internal details."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": "An unexpected error occurred"},
    )

# === Include Routers (Prefix & Tag for Each) ===
app.include_router(facebook_router,    prefix="/api/facebook", tags=["facebook"])
app.include_router(live_video_router,  prefix="/api/facebook", tags=["live-video"])
app.include_router(health_router,      prefix="/api/health",   tags=["health"])

# === Root Endpoint ===
@app.get("/")
def read_root():
    """Basic status endpoint."""
    return {"status": "LiveCast backend running."}

"""
--------------------------------------------------------------------
Deployment:
    - Run: uvicorn app.main:app --reload  (dev)
    - Run: uvicorn app.main:app --host 0.0.0.0 --port 8000  (prod/Railway)
    - Set FACEBOOK_APP_ID and FACEBOOK_APP_SECRET; check /api/health/detailed.

--------------------------------------------------------------------
"""
