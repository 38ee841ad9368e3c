"""Configuration from environment variables (DB path, route variant, lookup limit, logging, loader)."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ROUTE_VARIANTS = ("generator", "trading-period")


def _default_data_path() -> str:
    """Default data directory: backend/data (relative to this file)."""
    return str(Path(__file__).parent.parent / "data")


def get_database_path() -> str:
    """Return OFFERS_API_DB_PATH or default data dir."""
    return os.environ.get("OFFERS_API_DB_PATH", _default_data_path())


def get_route_variant() -> str:
    """Return OFFERS_API_VARIANT (generator | trading-period)."""
    return os.environ.get("OFFERS_API_VARIANT", "generator").strip().lower()


def get_lookup_limit() -> int:
    """Return OFFERS_API_LOOKUP_LIMIT, the row cap for unit and POC lookups."""
    return int(os.environ.get("OFFERS_API_LOOKUP_LIMIT", "100"))


def get_log_level() -> str:
    return os.environ.get("OFFERS_API_LOG_LEVEL", "INFO").upper()


def get_offers_csv_source() -> str:
    """Return OFFERS_CSV_SOURCE: local path or http(s) URL of an offers CSV."""
    return os.environ.get("OFFERS_CSV_SOURCE", "")
