"""SQLite repository for the offers table."""
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Iterable, List, Optional, Sequence

SCHEMA_PATH = Path(__file__).parent / "schema.sql"
DB_FILENAME = "offers.db"

OFFER_COLUMNS = (
    "TradingDate",
    "TradingPeriod",
    "Site",
    "Unit",
    "Tranche",
    "PointOfConnection",
    "Megawatts",
    "DollarsPerMegawattHour",
)


def _get_db_path(base_path: Optional[str] = None) -> str:
    """Resolve SQLite DB path. Uses base_path or backend/data, creates dir if needed."""
    if base_path:
        path = Path(base_path)
    else:
        path = Path(__file__).parent.parent.parent / "data"
    path.mkdir(parents=True, exist_ok=True)
    return str(path / DB_FILENAME)


@contextmanager
def _connection(db_path: str) -> Generator[sqlite3.Connection, None, None]:
    """Context manager for SQLite connection with row_factory and commit/rollback."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


class OfferRepository:
    """SQLite data access for offers. Every value from a request is bound as a parameter."""

    def __init__(self, db_path: Optional[str] = None):
        """Init DB and create the offers table if it is missing."""
        self.db_path = _get_db_path(db_path)
        self._init_db()

    def _init_db(self) -> None:
        with _connection(self.db_path) as conn:
            with open(SCHEMA_PATH, encoding="utf-8") as f:
                conn.executescript(f.read())

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[dict]:
        """Run a prepared statement with positional parameters, return every row as a dict."""
        with _connection(self.db_path) as conn:
            cur = conn.execute(sql, tuple(params))
            return [dict(row) for row in cur.fetchall()]

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        """Run a prepared statement with positional parameters, return the first row or None."""
        with _connection(self.db_path) as conn:
            cur = conn.execute(sql, tuple(params))
            row = cur.fetchone()
            return dict(row) if row else None

    def get_offers_by_unit(self, unit: str, limit: int = 100) -> List[dict]:
        """Return offers for a unit, ordered by date, period and tranche, capped at limit."""
        return self.fetch_all(
            """SELECT * FROM offers WHERE Unit = ?
            ORDER BY TradingDate, TradingPeriod, Tranche LIMIT ?""",
            (unit, limit),
        )

    def get_offers_for_date(self, trading_date: str) -> List[dict]:
        """Return every offer on a trading date, ordered by period, site, unit and tranche."""
        return self.fetch_all(
            """SELECT TradingDate, TradingPeriod, Site, Unit, Tranche, PointOfConnection,
                Megawatts, DollarsPerMegawattHour
            FROM offers WHERE TradingDate = ?
            ORDER BY TradingPeriod, Site, Unit, Tranche""",
            (trading_date,),
        )

    def get_offers_by_poc(self, poc: str, limit: int = 100) -> List[dict]:
        """Return offers at a point of connection, ordered by date, period and tranche, capped at limit."""
        return self.fetch_all(
            """SELECT * FROM offers WHERE PointOfConnection = ?
            ORDER BY TradingDate, TradingPeriod, Tranche LIMIT ?""",
            (poc, limit),
        )

    def get_generator_offers(self, unit: str, trading_date: str) -> List[dict]:
        """Return one unit's offers on one trading date, ordered by period and tranche."""
        return self.fetch_all(
            """SELECT * FROM offers WHERE Unit = ? AND TradingDate = ?
            ORDER BY TradingPeriod, Tranche""",
            (unit, trading_date),
        )

    def get_trading_period_offers(self, trading_date: str, period: int) -> List[dict]:
        """Return all offers for one trading period, ordered by POC, unit and tranche."""
        return self.fetch_all(
            """SELECT * FROM offers WHERE TradingDate = ? AND TradingPeriod = ?
            ORDER BY PointOfConnection, Unit, Tranche""",
            (trading_date, period),
        )

    def get_stats(self) -> dict:
        """Return {count, latest}: total row count and max trading date (None when empty)."""
        row = self.fetch_one("SELECT COUNT(*) AS count, MAX(TradingDate) AS latest FROM offers")
        return row or {"count": 0, "latest": None}

    def insert_offers_batch(self, rows: Iterable[dict]) -> int:
        """Insert batch of offer rows. Returns number of rows inserted."""
        placeholders = ", ".join("?" for _ in OFFER_COLUMNS)
        values = [tuple(r[c] for c in OFFER_COLUMNS) for r in rows]
        with _connection(self.db_path) as conn:
            conn.executemany(
                f"INSERT INTO offers ({', '.join(OFFER_COLUMNS)}) VALUES ({placeholders})",
                values,
            )
        return len(values)
