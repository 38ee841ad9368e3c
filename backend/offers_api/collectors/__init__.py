from __future__ import annotations

from .base import BaseCollector
from .offers_csv import OffersCsvCollector, parse_offers_csv

__all__ = [
    "BaseCollector",
    "OffersCsvCollector",
    "parse_offers_csv",
]
