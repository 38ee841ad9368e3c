"""Base collector: fetch offer rows from a source and append them to the offers table."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from loguru import logger

from ..db import OfferRepository


class BaseCollector(ABC):
    """Collectors produce offer row dicts keyed by the offers table columns."""

    name = "Offers"

    def __init__(self, repo: OfferRepository):
        self.repo = repo

    @abstractmethod
    async def fetch(self) -> Optional[List[dict]]:
        """Fetch offer rows. Returns None on failure, after logging why."""

    async def run(self) -> bool:
        """Fetch and insert into offers. Returns True when at least one row was stored."""
        rows = await self.fetch()
        if not rows:
            return False
        n = self.repo.insert_offers_batch(rows)
        logger.info("[{}] Stored {} offer rows", self.name, n)
        return True
