from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from fastapi import APIRouter, FastAPI
from loguru import logger

from .config import ROUTE_VARIANTS, get_database_path, get_log_level, get_lookup_limit, get_route_variant
from .db import OfferRepository
from .exceptions import OffersApiError
from .middleware import cors_middleware, offers_api_error_handler
from .models import ApiIndex
from .routers import ANY_METHOD, generator, offers, trading_period

API_MESSAGE = "NZ Electricity Map - Offers API"

UNIT_ENDPOINT = "GET /v1/offers/unit/:unitCode"
DATE_ENDPOINT = "GET /v1/offers/date/:date"
POC_ENDPOINT = "GET /v1/offers/poc/:pointOfConnection"
STATS_ENDPOINT = "GET /v1/offers/stats"

# Two route tables; each variant exposes exactly the endpoints it lists.
ROUTE_TABLES: Dict[str, List[str]] = {
    "generator": [UNIT_ENDPOINT, DATE_ENDPOINT, POC_ENDPOINT, generator.ENDPOINT, STATS_ENDPOINT],
    "trading-period": [UNIT_ENDPOINT, DATE_ENDPOINT, POC_ENDPOINT, trading_period.ENDPOINT, STATS_ENDPOINT],
}

VARIANT_ROUTERS: Dict[str, APIRouter] = {
    "generator": generator.router,
    "trading-period": trading_period.router,
}


def configure_logging(level: Optional[str] = None, sink=None) -> None:
    """Replace loguru's default sink with one at the configured level. Tracebacks omit local values."""
    logger.remove()
    logger.add(sink if sink is not None else sys.stderr, level=level or get_log_level(), diagnose=False)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if app.state.repo is None:
        app.state.repo = OfferRepository(get_database_path())
    logger.info(
        "Offers API ready | variant={} | db={}",
        app.state.variant,
        app.state.repo.db_path,
    )
    yield


def create_app(
    repo: Optional[OfferRepository] = None,
    variant: Optional[str] = None,
    lookup_limit: Optional[int] = None,
) -> FastAPI:
    """
    Build the API for one route variant.

    repo is the query store every handler reads from. When None, one is opened
    at startup from OFFERS_API_DB_PATH. variant defaults to OFFERS_API_VARIANT.
    """
    variant = (variant or get_route_variant()).strip().lower()
    if variant not in ROUTE_VARIANTS:
        raise ValueError(f"Unknown route variant {variant!r}, expected one of {ROUTE_VARIANTS}")

    app = FastAPI(
        title=API_MESSAGE,
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.repo = repo
    app.state.variant = variant
    app.state.lookup_limit = lookup_limit if lookup_limit is not None else get_lookup_limit()

    app.middleware("http")(cors_middleware)
    app.add_exception_handler(OffersApiError, offers_api_error_handler)

    app.include_router(offers.router)
    app.include_router(VARIANT_ROUTERS[variant])

    endpoints = ROUTE_TABLES[variant]

    # Catch-all: must be registered last
    @app.api_route("/{full_path:path}", methods=ANY_METHOD, response_model=ApiIndex)
    async def index(full_path: str):
        return ApiIndex(message=API_MESSAGE, endpoints=endpoints)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("offers_api.main:app", host="0.0.0.0", port=8000, reload=True)
