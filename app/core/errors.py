# app/core/errors.py

from typing import Any, Dict, List, Optional


class GatewayError(Exception):
    """
    Base exception for every failure a route can report.
    Rendered by the handler in main.py as {"error", "message"[, "details"]}.
    """

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(
        self,
        message: str,
        error: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.message = message
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_response(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


# --- Request-side errors (no upstream call is made) ---

class ValidationError(GatewayError):
    status_code = 400
    error = "Validation failed"


class UnauthorizedError(GatewayError):
    status_code = 401
    error = "Unauthorized"

    def __init__(self, message: str = "Bearer token required"):
        super().__init__(message)


class MissingParameterError(GatewayError):
    status_code = 400
    error = "Missing parameter"

    def __init__(self, parameter: str):
        super().__init__(f"{parameter} is required")
        self.parameter = parameter


class ConfigurationError(GatewayError):
    status_code = 500
    error = "Server configuration error"


# --- Upstream-side errors ---

class UpstreamError(GatewayError):
    """The Graph API answered with an error, or could not be reached."""


class UpstreamContractViolation(GatewayError):
    """A successful-looking Graph API response is missing a field we need."""


class GraphAPIError(Exception):
    """
    Raised by a GraphTransport when the upstream call fails.
    `payload` is the decoded error body, or None when no response arrived.
    """

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.payload = payload
        self.status_code = status_code


def translate_graph_error(exc: GraphAPIError, label: str) -> UpstreamError:
    """
    Maps a Graph API failure onto the HTTP error returned to our caller.
    - error.code in [400, 500) is used verbatim as the HTTP status.
    - Anything else (Graph codes like 190, 5xx, transport failures) becomes 500.
    - error.message is surfaced when present; otherwise `label` is reused.
    """
    upstream = (exc.payload or {}).get("error")
    if not isinstance(upstream, dict):
        upstream = {}

    code = upstream.get("code")
    message = upstream.get("message") or label

    if isinstance(code, int) and not isinstance(code, bool) and 400 <= code < 500:
        status_code = code
    else:
        status_code = 500

    return UpstreamError(message, error=label, status_code=status_code)
