from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, settings as default_settings
from app.frontend import build_frontend_router
from app.routes import API_PREFIX, health_router, preflight_response, router as api_router
from app.shared.errors import TimezoneUnavailableError, error_response
from app.shared.log import configure_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Added last, so outermost: every OPTIONS under /api is answered here.
    @app.middleware("http")
    async def answer_api_options(request: Request, call_next):
        if request.method == "OPTIONS" and request.url.path.startswith(API_PREFIX + "/"):
            return preflight_response(
                request.headers.get("access-control-request-headers")
            )
        return await call_next(request)

    app.add_exception_handler(TimezoneUnavailableError, _timezone_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    frontend_dir = settings.resolve_frontend_dir()
    if frontend_dir is not None:
        logger.info("Serving frontend", directory=str(frontend_dir))

    app.include_router(health_router)
    app.include_router(api_router)
    # Catch-all, must stay last.
    app.include_router(build_frontend_router(frontend_dir))
    return app


async def _timezone_error_handler(request: Request, exc: TimezoneUnavailableError):
    logger.opt(exception=exc).error(
        "Timezone database unavailable",
        city=exc.city,
        identifier=exc.identifier,
        path=request.url.path,
    )
    return error_response(status_code=500, error_message=str(exc))


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    city_failed = any(tuple(error.get("loc", ()))[-1:] == ("city",) for error in errors)
    message = "Invalid city" if city_failed else "Invalid request body"
    logger.info("Rejected request", path=request.url.path, reason=message)
    return error_response(
        status_code=400,
        error_message=message,
        data={
            "errors": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                for error in errors
            ]
        },
    )


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(
        status_code=exc.status_code,
        error_message=str(exc.detail),
        headers=exc.headers,
    )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting server", host=default_settings.host, port=default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
