"""Factory functions for pre-configured engines and pricing libraries."""

from __future__ import annotations

from typing import Any

from quotekit.data.catalog import SEED_SERVICES
from quotekit.data.repository import PricingLibrary
from quotekit.data.templates import QUOTE_TEMPLATES
from quotekit.engine import QuoteEngine
from quotekit.models.settings import PricingSettings


def create_default_engine(**overrides: Any) -> QuoteEngine:
    """Create a QuoteEngine with the editor's default pricing settings.

    Defaults are a 20% material markup, no travel fee, no minimum charge,
    no tax, and half-hour labor rounding. Any of them can be overridden by
    field name or camelCase alias.

    Example::

        from quotekit import create_default_engine

        engine = create_default_engine(tax_rate=8.5)
        evaluation = engine.evaluate(quote)
    """
    return QuoteEngine(PricingSettings.model_validate(overrides))


def create_default_library() -> PricingLibrary:
    """Create a PricingLibrary loaded with the built-in templates and services."""
    return PricingLibrary(QUOTE_TEMPLATES, SEED_SERVICES)
