from __future__ import annotations

from .offers import group_offers_by_timestamp, trading_period_start

__all__ = ["group_offers_by_timestamp", "trading_period_start"]
