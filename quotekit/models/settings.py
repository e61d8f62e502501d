"""Quote-wide pricing settings."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from quotekit.models.enums import LaborRounding
from quotekit.money import ZERO, Rate, to_decimal

DEFAULT_MATERIAL_MARKUP = Decimal("20")


class PricingSettings(BaseModel):
    """Pricing rules applied to every line item on a quote.

    Immutable: the editor builds a new value whenever a rule changes and
    passes it into each calculation.

    Attributes:
        material_markup: Percent added on top of material line items only.
        travel_fee: Flat amount added once per quote.
        minimum_charge: Floor for the subtotal after the travel fee.
        tax_rate: Percent applied to the post-minimum subtotal.
        labor_rounding: Interval labor hours are rounded up to when
            normalized. Never applied while pricing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    material_markup: Rate = DEFAULT_MATERIAL_MARKUP
    travel_fee: Rate = ZERO
    minimum_charge: Rate = ZERO
    tax_rate: Rate = ZERO
    labor_rounding: LaborRounding = LaborRounding.HALF_HOUR

    @field_validator("labor_rounding", mode="before")
    @classmethod
    def _normalize_labor_rounding(cls, v: Any) -> Any:
        """Accept ``0.25``, ``"0.50"``, ``1.0`` and friends as well as ``"none"``."""
        if v is None:
            return LaborRounding.NONE
        if isinstance(v, str) and v.strip().lower() == LaborRounding.NONE:
            return LaborRounding.NONE
        number = to_decimal(v)
        if number is None:
            return v
        return format(number.normalize(), "f")

    @property
    def labor_step(self) -> Decimal | None:
        """Rounding interval in hours, or None when rounding is off."""
        if self.labor_rounding == LaborRounding.NONE:
            return None
        return Decimal(self.labor_rounding.value)
