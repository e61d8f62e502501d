"""Quote totals: line items plus travel fee, minimum charge and tax.

1. **Subtotal**: sum of every priced line item.
2. **Travel fee**: added once per quote.
3. **Minimum charge**: if the subtotal with fees falls short, it is raised
   to the minimum. The floor applies to the whole quote, never per item.
4. **Tax**: the tax rate applied to the (possibly floored) subtotal.
5. **Total**: subtotal plus tax.

Subtotal and tax are rounded to cents before the total is formed, so
``total == subtotal + tax`` holds exactly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from quotekit.models.results import QuoteTotals
from quotekit.money import HUNDRED, ZERO, round_half_up
from quotekit.pricing import price_line_item

if TYPE_CHECKING:
    from collections.abc import Iterable
    from decimal import Decimal

    from quotekit.models.settings import PricingSettings


def subtotal_before_fees(line_items: Iterable[Any] | None, settings: PricingSettings) -> Decimal:
    """Sum of the priced line items. An empty or missing list is zero."""
    return sum(
        (price_line_item(item, settings) for item in line_items or ()),
        start=ZERO,
    )


def calculate_tax(subtotal: Decimal, tax_rate: Decimal) -> Decimal:
    return round_half_up(subtotal * tax_rate / HUNDRED)


def aggregate(line_items: Iterable[Any] | None, settings: PricingSettings) -> QuoteTotals:
    """Compute subtotal, tax and total for a quote."""
    subtotal = subtotal_before_fees(line_items, settings)

    if settings.travel_fee:
        subtotal += settings.travel_fee

    if settings.minimum_charge and subtotal < settings.minimum_charge:
        subtotal = settings.minimum_charge

    subtotal = round_half_up(subtotal)
    tax = calculate_tax(subtotal, settings.tax_rate) if settings.tax_rate else ZERO

    return QuoteTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)
