# app/utils/validators.py

import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# Human-readable messages for required request fields
REQUIRED_FIELD_MESSAGES = {
    "accessToken": "Access token is required",
    "pageId": "Page ID is required",
    "title": "Title is required",
    "pageAccessToken": "Page access token is required",
}

def field_name(loc) -> str:
    """Drops the leading 'body'/'query' marker from a pydantic error location."""
    parts = [str(part) for part in loc]
    if parts and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "body"

def describe_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Turns FastAPI/pydantic error dicts into field-level details:
    [{"field": "accessToken", "message": "Access token is required", "type": "missing"}]
    """
    details = []
    for error in errors:
        field = field_name(error.get("loc", ()))
        message = REQUIRED_FIELD_MESSAGES.get(field) if error.get("type") in ("missing", "string_too_short") else None
        details.append({
            "field": field,
            "message": message or error.get("msg", "Invalid value"),
            "type": error.get("type", "value_error"),
        })
    logger.debug(f"Request validation failed: {[d['field'] for d in details]}")
    return details

def parse_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extracts <token> from 'Bearer <token>'.
    Returns None for a missing header, another scheme, or an empty token.
    """
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None

"""
----------------------------------------------------------
Purpose:
    Input helpers shared by the Facebook routes and the error handlers.

What It Does:
    - Maps pydantic validation errors to stable, field-level details
      for 400 responses.
    - Parses the Authorization header into a bearer token.

Used By:
    - `main.py` (RequestValidationError handler).
    - `app/deps/facebook.py` (bearer token dependency).

----------------------------------------------------------
"""
