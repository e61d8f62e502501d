"""Pricing library repository: quote templates and the service catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quotekit.data.templates import DEFAULT_TEMPLATE_KEY, TemplateSummary
from quotekit.exceptions import ServiceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quotekit.data.catalog import CatalogService
    from quotekit.data.templates import QuoteTemplate

logger = logging.getLogger(__name__)


class PricingLibrary:
    """Repository for a provider's templates and saved services.

    Wraps in-memory seed data and provides lookup, listing and search.
    """

    def __init__(
        self,
        templates: Iterable[QuoteTemplate],
        services: Iterable[CatalogService],
    ) -> None:
        self._templates = {template.key: template for template in templates}
        self._services = list(services)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def get_template(self, key: str) -> QuoteTemplate:
        """Look up a template by key, falling back to the handyman template."""
        template = self._templates.get(key)
        if template is not None:
            return template
        logger.info("Unknown template %r; using %r", key, DEFAULT_TEMPLATE_KEY)
        return self._templates[DEFAULT_TEMPLATE_KEY]

    def list_templates(self) -> list[TemplateSummary]:
        return [
            TemplateSummary(key=t.key, name=t.name, description=t.description)
            for t in self._templates.values()
        ]

    # ------------------------------------------------------------------
    # Service catalog
    # ------------------------------------------------------------------

    @property
    def services(self) -> list[CatalogService]:
        return list(self._services)

    def get_service(self, service_id: int | str) -> CatalogService:
        """Look up a service by id.

        Raises:
            ServiceNotFoundError: If no service has that id.
        """
        for service in self._services:
            if service.id == service_id:
                return service
        raise ServiceNotFoundError(service_id)

    def categories(self) -> list[str]:
        """Distinct service categories in the order they first appear."""
        return list(dict.fromkeys(service.category for service in self._services))

    def search_services(self, query: str = "", category: str | None = None) -> list[CatalogService]:
        """Find services by case-insensitive substring.

        Without a category filter the query matches names and categories.
        With one, only names are matched and only that category is returned.
        ``"all"`` is the same as no filter.
        """
        needle = query.strip().lower()
        if category == "all":
            category = None

        matches: list[CatalogService] = []
        for service in self._services:
            if category is not None:
                if service.category != category:
                    continue
                haystack = service.name.lower()
            else:
                haystack = f"{service.name}\n{service.category}".lower()
            if needle in haystack:
                matches.append(service)
        return matches

    def add_service(self, service: CatalogService) -> None:
        """Save a new service to the catalog."""
        self._services.append(service)
