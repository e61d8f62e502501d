"""Profit analysis: cost basis against the billed total.

Labor cost is what hourly items cost before any fee, and material cost is
what materials cost before markup; the markup is the provider's margin, not
a cost. Fixed and square-foot items carry no tracked cost basis, so they are
all profit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from quotekit.aggregator import aggregate
from quotekit.models.line_items import HourlyLineItem, MaterialLineItem, parse_line_items
from quotekit.models.results import ProfitAnalysis
from quotekit.money import HUNDRED, ZERO, round_half_up

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quotekit.models.settings import PricingSettings


def analyze(line_items: Iterable[Any] | None, settings: PricingSettings) -> ProfitAnalysis:
    """Split labor and material cost out of a quote and compute its margin.

    The total is re-derived from the same inputs, so the analysis never
    depends on a total computed elsewhere.
    """
    items = parse_line_items(line_items)

    labor_cost = sum(
        (item.base_amount for item in items if isinstance(item, HourlyLineItem)),
        start=ZERO,
    )
    material_cost = sum(
        (item.base_amount for item in items if isinstance(item, MaterialLineItem)),
        start=ZERO,
    )

    total = aggregate(items, settings).total
    profit = total - labor_cost - material_cost
    profit_margin = profit / total * HUNDRED if total > 0 else ZERO

    return ProfitAnalysis(
        labor_cost=round_half_up(labor_cost),
        material_cost=round_half_up(material_cost),
        profit=round_half_up(profit),
        profit_margin=round_half_up(profit_margin),
    )
