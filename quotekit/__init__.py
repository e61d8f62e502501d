"""quotekit: pricing engine for field-service quotes.

Usage::

    from quotekit import create_default_engine

    engine = create_default_engine(tax_rate=8.5, minimum_charge=75)
    evaluation = engine.evaluate({"lineItems": [
        {"type": "hourly", "hours": 2, "rate": 75, "description": "Labor"},
    ]})
"""

from quotekit.aggregator import aggregate
from quotekit.data import CatalogService, PricingLibrary, QuoteTemplate, TemplateSummary
from quotekit.engine import QuoteEngine
from quotekit.exceptions import QuotekitError, ServiceNotFoundError
from quotekit.factory import create_default_engine, create_default_library
from quotekit.formatting import describe_rate, format_currency, format_hours, format_percent
from quotekit.models import (
    FixedLineItem,
    HourlyLineItem,
    LaborRounding,
    LineItem,
    LineItemType,
    LineTotal,
    MaterialLineItem,
    PricingSettings,
    ProfitAnalysis,
    Quote,
    QuoteEvaluation,
    QuoteTotals,
    SquareFootLineItem,
    UnpricedLineItem,
    ValidationResult,
    parse_line_item,
    parse_line_items,
)
from quotekit.pricing import normalize_labor_hours, price_line_item, round_labor_hours
from quotekit.profit import analyze
from quotekit.validation import validate_quote

__all__ = [
    "CatalogService",
    "FixedLineItem",
    "HourlyLineItem",
    "LaborRounding",
    "LineItem",
    "LineItemType",
    "LineTotal",
    "MaterialLineItem",
    "PricingLibrary",
    "PricingSettings",
    "ProfitAnalysis",
    "Quote",
    "QuoteEngine",
    "QuoteEvaluation",
    "QuoteTemplate",
    "QuoteTotals",
    "QuotekitError",
    "ServiceNotFoundError",
    "SquareFootLineItem",
    "TemplateSummary",
    "UnpricedLineItem",
    "ValidationResult",
    "aggregate",
    "analyze",
    "create_default_engine",
    "create_default_library",
    "describe_rate",
    "format_currency",
    "format_hours",
    "format_percent",
    "normalize_labor_hours",
    "parse_line_item",
    "parse_line_items",
    "price_line_item",
    "round_labor_hours",
    "validate_quote",
]
