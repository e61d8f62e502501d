"""Domain models for the quotekit pricing engine."""

from quotekit.models.enums import LaborRounding, LineItemType
from quotekit.models.line_items import (
    FixedLineItem,
    HourlyLineItem,
    LineItem,
    MaterialLineItem,
    SquareFootLineItem,
    UnpricedLineItem,
    parse_line_item,
    parse_line_items,
)
from quotekit.models.quote import Quote
from quotekit.models.results import (
    LineTotal,
    ProfitAnalysis,
    QuoteEvaluation,
    QuoteTotals,
    ValidationResult,
)
from quotekit.models.settings import PricingSettings

__all__ = [
    "FixedLineItem",
    "HourlyLineItem",
    "LaborRounding",
    "LineItem",
    "LineItemType",
    "LineTotal",
    "MaterialLineItem",
    "PricingSettings",
    "ProfitAnalysis",
    "Quote",
    "QuoteEvaluation",
    "QuoteTotals",
    "SquareFootLineItem",
    "UnpricedLineItem",
    "ValidationResult",
    "parse_line_item",
    "parse_line_items",
]
