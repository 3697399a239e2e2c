# app/core/config.py

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

# ---------------------------------------------
# Settings class for all configuration values
# ---------------------------------------------
class Settings(BaseSettings):
    # Facebook app credentials (required for token exchange)
    FACEBOOK_APP_ID: Optional[str] = None
    FACEBOOK_APP_SECRET: Optional[str] = None

    # Graph API base URL, including the API version
    FACEBOOK_GRAPH_API_URL: str = "https://graph.facebook.com/v18.0"

    ENVIRONMENT: str = "development"
    APP_VERSION: str = "1.0.0"

    # Frontend URL (used for CORS)
    FRONTEND_URL: str = "http://localhost:3000"

    RATE_LIMIT_EXCHANGE_TOKEN: str = "10/minute"
    RATE_LIMIT_GRAPH_READ: str = "60/minute"
    RATE_LIMIT_LIVE_VIDEO: str = "20/minute"

    class Config:
        env_file = ".env"  # Load variables from .env by default
        extra = "ignore"

    def missing_facebook_credentials(self) -> list:
        """Names of the required Facebook credential variables that are unset or empty."""
        required = {
            "FACEBOOK_APP_ID": self.FACEBOOK_APP_ID,
            "FACEBOOK_APP_SECRET": self.FACEBOOK_APP_SECRET,
        }
        return [name for name, value in required.items() if not value]

# ---------------------------------------------
# Singleton pattern for config (caches instance)
# ---------------------------------------------
@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings = get_settings()  # Import-time values only (CORS, rate limits)

"""
------------------------------------------------
✅ Purpose:
Centralizes all environment-based configuration for the LiveCast backend.
Keeps the Facebook app secret out of code.

🔍 What It Does:
- Loads and type-checks config from environment or .env file.
- Exposes `get_settings()` as a FastAPI dependency so routes receive the
  configuration by injection (tests override it with fake credentials).
- Exposes a cached `settings` object for import-time values such as the
  CORS origin and rate-limit strings.

📌 Used By:
- Gateway dependencies (`app/deps/facebook.py`) and the health routes.
- `main.py` for CORS.

🧠 Good Practices:
- Never read FACEBOOK_APP_ID / FACEBOOK_APP_SECRET with os.getenv in route
  code; always go through `Depends(get_settings)`.
- Credentials are optional here so the process can start and report
  itself "unhealthy" on /api/health/detailed instead of crashing.

🔐 Security:
- Do not commit your `.env` files or secrets to version control.
- Rotate the app secret on the Facebook developer console, then restart.

------------------------------------------------
"""
