from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from app.services.time_conversion import convert_time
from app.services.time_query import current_times
from app.shared.timezones import City
from models.current_time import CurrentTimeResponse
from models.time_conversion import ConversionRequest, ConversionResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

API_PREFIX = "/api"

router = APIRouter(prefix=API_PREFIX)


def get_now() -> datetime:
    """Current instant; overridden in tests to pin the clock."""
    return datetime.now(timezone.utc)


def preflight_response(requested_headers: Optional[str] = None) -> Response:
    """Empty 200 answer to any OPTIONS request under /api."""
    headers = dict(CORS_HEADERS)
    if requested_headers:
        headers["Access-Control-Allow-Headers"] = requested_headers
    return Response(status_code=200, headers=headers)


@router.get("/current-time", response_model=CurrentTimeResponse)
def current_time_endpoint(now: datetime = Depends(get_now)):
    return current_times(now)


@router.post("/convert-time", response_model=ConversionResponse)
def convert_time_endpoint(payload: ConversionRequest, now: datetime = Depends(get_now)):
    return convert_time(payload, now)


# Without this the SPA catch-all would answer GET with the entry document.
@router.api_route(
    "/convert-time",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def convert_time_wrong_method():
    raise HTTPException(
        status_code=405,
        detail="Method not allowed",
        headers={"Allow": "POST, OPTIONS"},
    )


health_router = APIRouter()


@health_router.get("/health")
def health_check():
    """Health check endpoint listing supported cities."""
    return {
        "status": "healthy",
        "cities": [city.value for city in City],
    }
