"""Custom exception hierarchy for quotekit."""

from __future__ import annotations


class QuotekitError(Exception):
    """Base exception for all quotekit errors."""


class ServiceNotFoundError(QuotekitError):
    """Raised when a catalog service id does not exist."""

    def __init__(self, service_id: int | str) -> None:
        self.service_id = service_id
        super().__init__(f"No catalog service with id {service_id!r}")
