"""Seed pricing data: quote templates and the service catalog."""

from quotekit.data.catalog import SEED_SERVICES, CatalogService
from quotekit.data.repository import PricingLibrary
from quotekit.data.templates import QUOTE_TEMPLATES, QuoteTemplate, TemplateSummary

__all__ = [
    "QUOTE_TEMPLATES",
    "SEED_SERVICES",
    "CatalogService",
    "PricingLibrary",
    "QuoteTemplate",
    "TemplateSummary",
]
