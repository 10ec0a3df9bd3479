from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from fastapi.responses import JSONResponse


class TimezoneUnavailableError(RuntimeError):
    """Raised when the host's tz database has no entry for a city."""

    def __init__(self, city: str, identifier: str, reason: str = "") -> None:
        self.city = city
        self.identifier = identifier
        self.reason = reason
        message = f"Error loading {city} timezone"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def error_response(
    *,
    status_code: int,
    error_message: str,
    data: Optional[Dict[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Construct the JSON body every failed request gets."""
    error_payload: Dict[str, Any] = {"error": error_message}
    if data:
        error_payload["data"] = data

    return JSONResponse(
        status_code=status_code,
        content=error_payload,
        headers=dict(headers) if headers else None,
    )
