# app/routes/health.py

import logging
import platform
import time
from datetime import datetime, timezone

import psutil
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings

router = APIRouter()
logger = logging.getLogger(__name__)

def _process_snapshot(settings: Settings) -> dict:
    process = psutil.Process()
    memory = process.memory_info()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": max(time.time() - process.create_time(), 0.0),
        "memory": {"rss": memory.rss, "vms": memory.vms},
        "version": settings.APP_VERSION,
    }

@router.get("")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Liveness endpoint.

    Returns:
        JSON with status "healthy", timestamp, uptime (seconds), memory and version.
        Always 200, whatever the configuration state.
    """
    return _process_snapshot(settings)

@router.get("/detailed")
def detailed_health_check(settings: Settings = Depends(get_settings)):
    """
    Liveness plus runtime info and required-configuration check.
    Returns 503 with `missingEnvironmentVariables` when Facebook credentials are unset.
    """
    health = _process_snapshot(settings)
    health.update({
        "environment": settings.ENVIRONMENT,
        "pythonVersion": platform.python_version(),
        "platform": platform.system().lower(),
        "arch": platform.machine(),
    })

    missing = settings.missing_facebook_credentials()
    if missing:
        logger.warning(f"Detailed health check: missing configuration {missing}")
        health["status"] = "unhealthy"
        health["missingEnvironmentVariables"] = missing
        return JSONResponse(status_code=503, content=health)

    return health

"""
------------------------------------------------------------
✅ Purpose:
Lets load balancers and deploy platforms probe the service.

🔍 What It Does:
- GET /api/health: process liveness (never fails).
- GET /api/health/detailed: adds environment, Python runtime and platform,
  and reports 503 if FACEBOOK_APP_ID / FACEBOOK_APP_SECRET are missing.

🧠 Good Practices:
- No Graph API calls here; only process and configuration introspection.
- Only the *names* of missing variables are reported, never values.

------------------------------------------------------------
"""
