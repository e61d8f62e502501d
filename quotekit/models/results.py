"""Derived results: totals, profit analysis, validation and evaluation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from quotekit.money import Money, to_minor_units

_RESULT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class QuoteTotals(BaseModel):
    """Subtotal, tax and total of a quote, each rounded to cents."""

    model_config = _RESULT_CONFIG

    subtotal: Money
    tax: Money
    total: Money

    @model_validator(mode="after")
    def total_is_subtotal_plus_tax(self) -> QuoteTotals:
        if self.total != self.subtotal + self.tax:
            msg = (
                f"total must equal subtotal + tax, "
                f"got {self.total} != {self.subtotal} + {self.tax}"
            )
            raise ValueError(msg)
        return self

    def to_minor_units(self) -> dict[str, int]:
        """Totals as integer cents, the shape quotes are stored in."""
        return {
            "subtotal": to_minor_units(self.subtotal),
            "tax": to_minor_units(self.tax),
            "total": to_minor_units(self.total),
        }


class ProfitAnalysis(BaseModel):
    """Cost basis, profit and margin of a quote.

    ``profit_margin`` is a percentage of the quote total and goes negative
    when labor and material costs exceed what is billed.
    """

    model_config = _RESULT_CONFIG

    labor_cost: Money
    material_cost: Money
    profit: Money
    profit_margin: Money


class ValidationResult(BaseModel):
    """Business-rule findings. Only errors block sending a quote."""

    model_config = _RESULT_CONFIG

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @computed_field(alias="isValid")  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.errors


class LineTotal(BaseModel):
    """Priced amount of one line item, in input order."""

    model_config = _RESULT_CONFIG

    id: int | str | None = None
    name: str = ""
    type: str | None = None
    amount: Money


class QuoteEvaluation(BaseModel):
    """Everything a quote editor renders, computed in one call."""

    model_config = _RESULT_CONFIG

    line_totals: list[LineTotal]
    totals: QuoteTotals
    profit: ProfitAnalysis
    validation: ValidationResult
