# app/core/limiter.py

from slowapi import Limiter
from slowapi.util import get_remote_address

# ---------------------------------------------
# Rate Limiting Configuration
# ---------------------------------------------
# Limits each unique IP (get_remote_address) to 60 requests per minute by default.
limiter = Limiter(
    key_func=get_remote_address,     # Use the remote IP address as the identifier
    default_limits=["60/minute"]
)

"""
------------------------------------------------
✅ Purpose:
Keeps a single client from burning through the Facebook app's Graph API quota
by rate-limiting callers per IP.

🔍 What It Does:
- Instantiates a `Limiter` from SlowAPI with a global default limit.
- Registered on `app.state.limiter` with SlowAPIMiddleware in `main.py`.
- Routes tighten their own limits with `@limiter.limit(settings.RATE_LIMIT_...)`.

📌 Used By:
- `main.py`, `app/routes/facebook.py`, `app/routes/live_video.py`.
- Tests switch it off with `limiter.enabled = False`.

------------------------------------------------
"""
