"""Quote engine: one set of pricing settings, every calculation.

The QuoteEngine binds an immutable :class:`PricingSettings` value and runs
the calculation pipeline against it:

1. **Line pricing**: each item priced by its own mode (fixed, hourly,
   square-foot, or marked-up material).
2. **Aggregation**: subtotal, travel fee, minimum-charge floor, tax.
3. **Profit analysis**: labor and material cost basis against the total.
4. **Validation**: business rules a quote should pass before it is sent.

Every method is a pure function of its arguments and the bound settings, so
an editor can call :meth:`QuoteEngine.evaluate` on each keystroke.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from quotekit.aggregator import aggregate
from quotekit.models.line_items import parse_line_items
from quotekit.models.quote import Quote
from quotekit.models.results import QuoteEvaluation
from quotekit.pricing import normalize_labor_hours, price_line_item, price_line_items
from quotekit.profit import analyze
from quotekit.validation import validate_quote

if TYPE_CHECKING:
    from collections.abc import Iterable
    from decimal import Decimal

    from quotekit.models.line_items import LineItem
    from quotekit.models.results import LineTotal, ProfitAnalysis, QuoteTotals, ValidationResult
    from quotekit.models.settings import PricingSettings


class QuoteEngine:
    """Prices, totals, analyzes and validates quotes under fixed settings.

    Args:
        settings: The pricing rules every calculation uses.

    Example::

        from quotekit import PricingSettings, QuoteEngine

        engine = QuoteEngine(PricingSettings(tax_rate=8.5, minimum_charge=75))
        totals = engine.totals([{"type": "hourly", "hours": 2, "rate": 75}])
    """

    def __init__(self, settings: PricingSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> PricingSettings:
        return self._settings

    def with_settings(self, **changes: Any) -> QuoteEngine:
        """Return a new engine with some settings changed.

        Accepts field names or their camelCase aliases.
        """
        settings_cls = type(self._settings)
        names = {f.alias: name for name, f in settings_cls.model_fields.items() if f.alias}
        merged = self._settings.model_dump()
        for key, value in changes.items():
            merged[names.get(key, key)] = value
        return QuoteEngine(settings_cls.model_validate(merged))

    def price(self, item: Any) -> Decimal:
        return price_line_item(item, self._settings)

    def line_totals(self, line_items: Iterable[Any] | None) -> list[LineTotal]:
        return price_line_items(line_items or (), self._settings)

    def totals(self, line_items: Iterable[Any] | None) -> QuoteTotals:
        return aggregate(line_items, self._settings)

    def profit(self, line_items: Iterable[Any] | None) -> ProfitAnalysis:
        return analyze(line_items, self._settings)

    def validate(self, quote: Any) -> ValidationResult:
        return validate_quote(quote, self._settings)

    def normalize_hours(self, item: Any) -> LineItem:
        return normalize_labor_hours(item, self._settings)

    def evaluate(self, quote: Any) -> QuoteEvaluation:
        """Compute line totals, totals, profit and validation in one call.

        Args:
            quote: A :class:`Quote`, a mapping with ``lineItems``, or a
                plain sequence of line items.
        """
        if not isinstance(quote, Quote):
            if quote is None or isinstance(quote, Mapping):
                quote = Quote.model_validate(dict(quote or {}))
            else:
                quote = Quote(line_items=parse_line_items(quote))

        items = quote.items
        return QuoteEvaluation(
            line_totals=self.line_totals(items),
            totals=self.totals(items),
            profit=self.profit(items),
            validation=self.validate(quote),
        )
