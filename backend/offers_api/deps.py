"""FastAPI dependencies resolving per-app collaborators from app.state."""
from __future__ import annotations

from fastapi import Request

from .db import OfferRepository


def get_repository(request: Request) -> OfferRepository:
    """Return the OfferRepository injected into the app by create_app()."""
    repo = getattr(request.app.state, "repo", None)
    if repo is None:
        raise RuntimeError("Offer repository not initialized")
    return repo


def get_lookup_limit(request: Request) -> int:
    return getattr(request.app.state, "lookup_limit", 100)
