"""Trading period lookup: every unit's offers for one period of one trading date."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends

from . import ANY_METHOD
from ..db import OfferRepository
from ..deps import get_repository
from ..exceptions import InvalidParameterError, MissingParameterError
from ..models import OfferRow

router = APIRouter(prefix="/v1/offers", tags=["trading-period"])

ENDPOINT = "GET /v1/offers/trading-period?date=YYYY-MM-DD&period=N"


@router.api_route("/trading-period", methods=ANY_METHOD, response_model=List[OfferRow])
async def get_trading_period_offers(
    date: Optional[str] = None,
    period: Optional[str] = None,
    repo: OfferRepository = Depends(get_repository),
):
    """Return offers for ?date=2025-12-30&period=1, ordered by POC, unit and tranche."""
    if not date or not period:
        raise MissingParameterError("Missing date or period parameter")
    try:
        trading_period = int(period)
    except ValueError:
        raise InvalidParameterError("Invalid period parameter")
    rows = repo.get_trading_period_offers(date, trading_period)
    return [OfferRow.model_validate(r) for r in rows]
