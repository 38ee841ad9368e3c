"""
Exceptions raised by request handlers and rendered as JSON error bodies.
"""
from __future__ import annotations


class OffersApiError(Exception):
    """Base exception for the offers API. Carries the HTTP status to answer with."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(OffersApiError):
    """A required query parameter was absent or empty."""

    status_code = 400


class InvalidParameterError(OffersApiError):
    """A query parameter could not be parsed."""

    status_code = 400
