"""Offers CSV collector: load a published offers file (local path or URL) into the offers table."""
from __future__ import annotations

import asyncio
import csv
import io
import sys
from pathlib import Path
from typing import List, Optional

import httpx
from loguru import logger

from ..config import get_database_path, get_offers_csv_source
from ..db import OfferRepository
from ..db.repository import OFFER_COLUMNS
from .base import BaseCollector

INT_COLUMNS = ("TradingPeriod", "Tranche")
FLOAT_COLUMNS = ("Megawatts", "DollarsPerMegawattHour")


def parse_offers_csv(text: str) -> List[dict]:
    """
    Parse offers CSV text into row dicts holding only the offer columns.

    Header keys are normalised (BOM / whitespace). Rows missing any offer column
    or with non-numeric quantities are skipped.
    """
    reader = csv.DictReader(io.StringIO(text))
    rows: List[dict] = []
    skipped = 0
    for raw in reader:
        clean = {k.strip().lstrip("\ufeff"): (v or "").strip() for k, v in raw.items() if k is not None}
        if any(not clean.get(c) for c in OFFER_COLUMNS):
            skipped += 1
            continue
        try:
            row = {c: clean[c] for c in OFFER_COLUMNS}
            for c in INT_COLUMNS:
                row[c] = int(row[c])
            for c in FLOAT_COLUMNS:
                row[c] = float(row[c])
        except ValueError:
            skipped += 1
            continue
        rows.append(row)
    if skipped:
        logger.warning("[OffersCSV] Skipped {} incomplete rows", skipped)
    return rows


class OffersCsvCollector(BaseCollector):
    """Fetch an offers CSV and append its rows to the offers table."""

    name = "OffersCSV"

    def __init__(
        self,
        repo: OfferRepository,
        source: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """source: file path or http(s) URL, defaults to OFFERS_CSV_SOURCE. transport is passed to httpx."""
        super().__init__(repo)
        self.source = source or get_offers_csv_source()
        self.transport = transport

    async def _read_source(self) -> str:
        if self.source.startswith(("http://", "https://")):
            async with httpx.AsyncClient(timeout=60.0, transport=self.transport) as client:
                r = await client.get(self.source)
                r.raise_for_status()
                return r.text
        return Path(self.source).read_text(encoding="utf-8")

    async def fetch(self) -> Optional[List[dict]]:
        """Fetch and parse the CSV. Returns list of offer row dicts or None."""
        if not self.source:
            logger.error("[OffersCSV] No source configured")
            return None
        try:
            text = await self._read_source()
        except (httpx.HTTPError, OSError, UnicodeDecodeError) as e:
            logger.error("[OffersCSV] Fetch failed for {}: {}", self.source, e)
            return None
        try:
            return parse_offers_csv(text)
        except csv.Error as e:
            logger.error("[OffersCSV] Malformed CSV in {}: {}", self.source, e)
            return None


def main(argv: Optional[List[str]] = None) -> int:
    """Usage: python -m offers_api.collectors.offers_csv [SOURCE]"""
    args = sys.argv[1:] if argv is None else argv
    repo = OfferRepository(get_database_path())
    collector = OffersCsvCollector(repo, source=args[0] if args else None)
    return 0 if asyncio.run(collector.run()) else 1


if __name__ == "__main__":
    sys.exit(main())
