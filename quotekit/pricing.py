"""Line item pricing and labor-hour normalization."""

from __future__ import annotations

from decimal import ROUND_CEILING, Decimal
from typing import TYPE_CHECKING, Any

from quotekit.models.enums import LaborRounding
from quotekit.models.line_items import HourlyLineItem, MaterialLineItem, parse_line_item
from quotekit.models.results import LineTotal
from quotekit.money import HUNDRED, coerce_amount, round_half_up

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quotekit.models.line_items import LineItem
    from quotekit.models.settings import PricingSettings


def price_line_item(item: Any, settings: PricingSettings) -> Decimal:
    """Billed amount of one line item, rounded to cents.

    Fixed items bill their price, hourly items hours x rate, square-foot
    items area x rate, and material items quantity x unit price plus the
    material markup. Items of unknown type bill nothing.
    """
    item = parse_line_item(item)
    amount = item.base_amount
    if isinstance(item, MaterialLineItem) and settings.material_markup:
        amount *= 1 + settings.material_markup / HUNDRED
    return round_half_up(amount)


def price_line_items(items: Iterable[Any], settings: PricingSettings) -> list[LineTotal]:
    """Price every item, keeping input order."""
    totals: list[LineTotal] = []
    for raw in items:
        item = parse_line_item(raw)
        totals.append(
            LineTotal(
                id=item.id,
                name=item.name,
                type=item.type,
                amount=price_line_item(item, settings),
            )
        )
    return totals


def _round_up_to_step(hours: Decimal, step: Decimal) -> Decimal:
    steps = (hours / step).to_integral_value(rounding=ROUND_CEILING)
    return steps * step


def round_labor_hours(hours: Any, rule: LaborRounding | str = LaborRounding.HALF_HOUR) -> Decimal:
    """Round hours up to the next multiple of ``rule``.

    ``1.2`` hours at the half-hour rule becomes ``1.5``; at the quarter-hour
    rule, ``1.25``. The ``none`` rule returns the hours unchanged.
    """
    value = coerce_amount(hours)
    rule = LaborRounding(rule)
    if rule == LaborRounding.NONE:
        return value
    return _round_up_to_step(value, Decimal(rule.value))


def normalize_labor_hours(item: Any, settings: PricingSettings) -> LineItem:
    """Return ``item`` with its hours rounded per ``settings.labor_rounding``.

    Only hourly items change. The normalized item is what an editor shows
    and stores; pricing still reads whatever hours the item carries.
    """
    item = parse_line_item(item)
    step = settings.labor_step
    if not isinstance(item, HourlyLineItem) or step is None:
        return item
    rounded = _round_up_to_step(item.hours, step)
    if rounded == item.hours:
        return item
    return item.model_copy(update={"hours": rounded})
