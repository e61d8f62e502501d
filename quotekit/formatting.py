"""Formatting helpers for quote output.

Currency is shown the way clients read it on a quote: US dollars with cents
and comma separators (e.g. '$1,234.50').
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from quotekit.models.enums import LineItemType
from quotekit.money import round_half_up, to_decimal

if TYPE_CHECKING:
    from quotekit.data.catalog import CatalogService

TENTH = Decimal("0.1")


def format_currency(amount: Any) -> str:
    """Format an amount as '$1,234.56'; negatives as '-$12.00'.

    Malformed amounts are shown as '$0.00'.
    """
    value = round_half_up(to_decimal(amount) or Decimal(0))
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${abs(value):,.2f}"


def format_percent(value: Any) -> str:
    """Format a percentage with one decimal place, e.g. '12.5%'."""
    number = round_half_up(to_decimal(value) or Decimal(0), TENTH)
    return f"{number:.1f}%"


def format_hours(hours: Any) -> str:
    """Format labor hours, e.g. '1 hr', '2.5 hrs'."""
    number = to_decimal(hours) or Decimal(0)
    text = f"{number.normalize():f}" if number else "0"
    return f"{text} hr" if number == 1 else f"{text} hrs"


def describe_rate(service: CatalogService) -> str:
    """Short price label for a catalog service: '$120', '$75/hr', '$0.50/sqft'."""
    if service.type == LineItemType.FIXED and service.price is not None:
        return format_currency(service.price).removesuffix(".00")
    if service.type == LineItemType.HOURLY and service.rate is not None:
        return f"{format_currency(service.rate).removesuffix('.00')}/hr"
    if service.type == LineItemType.SQFT and service.rate_per_sqft is not None:
        return f"{format_currency(service.rate_per_sqft)}/sqft"
    return "Custom"
