"""Offer lookups shared by every route variant: unit, date (grouped), POC, stats."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from loguru import logger

from . import ANY_METHOD
from ..db import OfferRepository
from ..deps import get_lookup_limit, get_repository
from ..models import GroupedOffers, OfferRow, OfferStats
from ..transformers import group_offers_by_timestamp

router = APIRouter(prefix="/v1/offers", tags=["offers"])


def _last_segment(path: str) -> str:
    """Trailing path segment, used verbatim as the lookup key."""
    return path.split("/")[-1]


@router.api_route("/unit/{unit_path:path}", methods=ANY_METHOD, response_model=List[OfferRow])
async def get_unit_offers(
    unit_path: str,
    repo: OfferRepository = Depends(get_repository),
    limit: int = Depends(get_lookup_limit),
):
    """Return up to `limit` offers for a unit code, e.g. /v1/offers/unit/TST0."""
    unit = _last_segment(unit_path)
    rows = repo.get_offers_by_unit(unit, limit=limit)
    return [OfferRow.model_validate(r) for r in rows]


@router.api_route("/date/{date_path:path}", methods=ANY_METHOD, response_model=GroupedOffers)
async def get_date_offers(date_path: str, repo: OfferRepository = Depends(get_repository)):
    """Return every offer on a trading date grouped by period start timestamp, e.g. /v1/offers/date/2025-12-30."""
    trading_date = _last_segment(date_path)
    rows = repo.get_offers_for_date(trading_date)
    grouped = group_offers_by_timestamp(trading_date, (OfferRow.model_validate(r) for r in rows))
    logger.debug("Grouped {} rows into {} periods for {}", len(rows), len(grouped), trading_date)
    return grouped


@router.api_route("/poc/{poc_path:path}", methods=ANY_METHOD, response_model=List[OfferRow])
async def get_poc_offers(
    poc_path: str,
    repo: OfferRepository = Depends(get_repository),
    limit: int = Depends(get_lookup_limit),
):
    """Return up to `limit` offers at a point of connection, e.g. /v1/offers/poc/TEST001."""
    poc = _last_segment(poc_path)
    rows = repo.get_offers_by_poc(poc, limit=limit)
    return [OfferRow.model_validate(r) for r in rows]


@router.api_route("/stats", methods=ANY_METHOD, response_model=OfferStats)
async def get_offer_stats(repo: OfferRepository = Depends(get_repository)):
    """Row count and latest trading date in the offers table."""
    stats = repo.get_stats()
    return OfferStats(totalOffers=stats["count"], latestTradingDate=stats["latest"])
