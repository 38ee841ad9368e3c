"""Fixed CORS headers, preflight handling and top-level error responses."""
from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from loguru import logger

from .exceptions import OffersApiError
from .models import ErrorResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def offers_api_error_handler(request: Request, exc: OffersApiError) -> JSONResponse:
    """Render client errors raised by handlers as {"error": message}."""
    logger.info("{} {} rejected: {}", request.method, request.url.path, exc.message)
    return JSONResponse(ErrorResponse(error=exc.message).model_dump(), status_code=exc.status_code)


async def cors_middleware(request: Request, call_next) -> Response:
    """
    Answer OPTIONS preflight directly, convert any uncaught exception to a 500
    {"error": message} body, and stamp CORS_HEADERS on every response.
    """
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("{} {} failed: {}", request.method, request.url.path, exc)
            response = JSONResponse(ErrorResponse(error=str(exc)).model_dump(), status_code=500)
    response.headers.update(CORS_HEADERS)
    logger.info("{} {} -> {}", request.method, request.url.path, response.status_code)
    return response
