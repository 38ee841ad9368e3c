"""
Shared fixtures: an offers repository on a temporary SQLite file and API clients per route variant.
"""

import pytest
from fastapi.testclient import TestClient

from offers_api.db import OfferRepository
from offers_api.main import create_app


def offer(date, period, site, unit, tranche, mw, price, poc=None):
    return {
        "TradingDate": date,
        "TradingPeriod": period,
        "Site": site,
        "Unit": unit,
        "Tranche": tranche,
        "PointOfConnection": poc or f"{site}2201",
        "Megawatts": mw,
        "DollarsPerMegawattHour": price,
    }


# Inserted deliberately out of order so the query ordering is exercised.
SAMPLE_OFFERS = [
    offer("2025-01-02", 1, "HLY", "HLY1", 1, 100.0, 80.0),
    offer("2025-01-01", 2, "HLY", "HLY1", 2, 50.0, 120.0),
    offer("2025-01-01", 1, "WKM", "WKM0", 1, 20.0, 0.01, poc="WKM2201"),
    offer("2025-01-01", 1, "HLY", "HLY1", 2, 40.0, 150.0),
    offer("2025-01-01", 1, "HLY", "HLY1", 1, 60.0, 95.5),
    offer("2025-01-01", 2, "HLY", "HLY1", 1, 70.0, 90.0),
    offer("2025-01-01", 1, "HLY", "HLY2", 1, 30.0, 99.0, poc="HLY2201"),
]


@pytest.fixture
def repo(tmp_path):
    return OfferRepository(str(tmp_path))


@pytest.fixture
def seeded_repo(repo):
    repo.insert_offers_batch(SAMPLE_OFFERS)
    return repo


@pytest.fixture
def make_client(seeded_repo):
    def _make(variant="generator", repo=seeded_repo, **kwargs):
        return TestClient(create_app(repo=repo, variant=variant, **kwargs))

    return _make


@pytest.fixture
def client(make_client):
    return make_client("generator")
