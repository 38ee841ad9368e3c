"""
Transform flat offer rows for one trading date -> offers grouped by period start timestamp.
"""
from __future__ import annotations

from typing import Dict, Iterable, List

from ..models import GroupedOffers, GroupedTranche, OfferRow, SiteUnitOffers


def trading_period_start(period: int) -> str:
    """
    Start of a trading period as HH:MM:00. Period 1 = 00:00, period 48 = 23:30.
    Periods outside 1..48 are not rejected; the same arithmetic applies.
    """
    minutes = (period - 1) * 30
    return f"{minutes // 60:02d}:{minutes % 60:02d}:00"


def group_offers_by_timestamp(trading_date: str, rows: Iterable[OfferRow]) -> GroupedOffers:
    """
    Group rows into {timestamp: [{site, unit, tranches: [...]}]}.

    trading_date is used verbatim in the timestamp key. Timestamps, site/unit
    entries and tranches keep the order in which rows arrive.
    """
    grouped: Dict[str, List[SiteUnitOffers]] = {}
    for row in rows:
        timestamp = f"{trading_date}T{trading_period_start(row.TradingPeriod)}"
        entries = grouped.setdefault(timestamp, [])

        entry = next((e for e in entries if e.site == row.Site and e.unit == row.Unit), None)
        if entry is None:
            entry = SiteUnitOffers(site=row.Site, unit=row.Unit, tranches=[])
            entries.append(entry)

        entry.tranches.append(
            GroupedTranche(
                tranche=row.Tranche,
                megawatts=row.Megawatts,
                price=row.DollarsPerMegawattHour,
            )
        )
    return grouped
