"""Business-rule checks run before a quote goes to a client.

Every rule runs on every call; none short-circuits another. Only a quote
with no line items is an error. The rest are warnings a provider may
acknowledge and send anyway.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from quotekit.aggregator import aggregate
from quotekit.formatting import format_currency, format_percent
from quotekit.models.line_items import parse_line_items
from quotekit.models.quote import Quote
from quotekit.models.results import ValidationResult
from quotekit.profit import analyze

if TYPE_CHECKING:
    from quotekit.models.line_items import LineItem
    from quotekit.models.settings import PricingSettings

LARGE_QUOTE_THRESHOLD = Decimal("10000")
LOW_MARGIN_PERCENT = Decimal("15")
HIGH_MARGIN_PERCENT = Decimal("50")

EMPTY_QUOTE_ERROR = "Quote must have at least one line item."


def _line_items_of(quote: Any) -> list[LineItem] | None:
    if quote is None:
        return None
    if isinstance(quote, Quote):
        return quote.line_items
    if isinstance(quote, Mapping):
        raw = quote.get("lineItems", quote.get("line_items"))
        return None if raw is None else parse_line_items(raw)
    return parse_line_items(quote)


def validate_quote(quote: Any, settings: PricingSettings) -> ValidationResult:
    """Check a quote against the provider's pricing rules.

    Args:
        quote: A :class:`Quote`, a mapping carrying ``lineItems`` (or
            ``line_items``), or a plain sequence of line items.
        settings: The pricing settings the quote is priced under.

    Returns:
        Errors that block sending and warnings that only need confirmation.
    """
    items = _line_items_of(quote) or []
    errors: list[str] = []
    warnings: list[str] = []

    if not items:
        errors.append(EMPTY_QUOTE_ERROR)

    missing = sum(1 for item in items if not item.description)
    if missing:
        noun = "line item is" if missing == 1 else "line items are"
        warnings.append(f"{missing} {noun} missing a description")

    total = aggregate(items, settings).total
    if settings.minimum_charge and total < settings.minimum_charge:
        warnings.append(
            f"Quote total ({format_currency(total)}) is below minimum charge "
            f"({format_currency(settings.minimum_charge)})"
        )

    if total > LARGE_QUOTE_THRESHOLD:
        warnings.append(
            f"Quote exceeds {format_currency(LARGE_QUOTE_THRESHOLD)} - "
            f"consider breaking the work into phases"
        )

    margin = analyze(items, settings).profit_margin
    if margin < LOW_MARGIN_PERCENT:
        warnings.append(f"Low profit margin ({format_percent(margin)})")
    elif margin > HIGH_MARGIN_PERCENT:
        warnings.append(
            f"High profit margin ({format_percent(margin)}) - may lose to competitors"
        )

    return ValidationResult(errors=errors, warnings=warnings)
