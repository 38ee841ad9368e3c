"""Pydantic models for offer rows, grouped offers, stats, index and error bodies."""
from __future__ import annotations

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict


# int or float as stored; no coercion between the two
Number = Union[int, float]


class OfferRow(BaseModel):
    """One row of the offers table. Column names are kept as stored."""

    # SELECT * may return more columns than the ones listed here
    model_config = ConfigDict(extra="allow")

    TradingDate: str
    TradingPeriod: int          # 1..48, not validated
    Site: str
    Unit: str
    Tranche: int
    PointOfConnection: str
    Megawatts: Number
    DollarsPerMegawattHour: Number


class GroupedTranche(BaseModel):
    tranche: int
    megawatts: Number
    price: Number


class SiteUnitOffers(BaseModel):
    site: str
    unit: str
    tranches: List[GroupedTranche] = []


GroupedOffers = Dict[str, List[SiteUnitOffers]]


class OfferStats(BaseModel):
    totalOffers: int
    latestTradingDate: Optional[str] = None


class ApiIndex(BaseModel):
    message: str
    endpoints: List[str]


class ErrorResponse(BaseModel):
    error: str
