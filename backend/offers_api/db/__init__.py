from __future__ import annotations

from .repository import OfferRepository

__all__ = ["OfferRepository"]
