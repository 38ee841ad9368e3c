"""Generator lookup: one unit's offers on one trading date."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends

from . import ANY_METHOD
from ..db import OfferRepository
from ..deps import get_repository
from ..exceptions import MissingParameterError
from ..models import OfferRow

router = APIRouter(prefix="/v1/offers", tags=["generator"])

ENDPOINT = "GET /v1/offers/generator?unit=UNIT&date=YYYY-MM-DD"


@router.api_route("/generator", methods=ANY_METHOD, response_model=List[OfferRow])
async def get_generator_offers(
    unit: Optional[str] = None,
    date: Optional[str] = None,
    repo: OfferRepository = Depends(get_repository),
):
    """Return offers for ?unit=TST0&date=2025-12-30, ordered by period and tranche."""
    if not unit or not date:
        raise MissingParameterError("Missing unit or date parameter")
    rows = repo.get_generator_offers(unit, date)
    return [OfferRow.model_validate(r) for r in rows]
