"""Tests for line item pricing and labor-hour rounding."""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType, SimpleNamespace

import pytest

from quotekit.models.enums import LaborRounding
from quotekit.models.line_items import FixedLineItem, HourlyLineItem
from quotekit.models.settings import PricingSettings
from quotekit.pricing import (
    normalize_labor_hours,
    price_line_item,
    price_line_items,
    round_labor_hours,
)


@pytest.fixture()
def settings() -> PricingSettings:
    """No markup, fees or tax."""
    return PricingSettings(material_markup=0)


# ---------------------------------------------------------------------------
# Pricing modes
# ---------------------------------------------------------------------------


class TestPricingModes:
    def test_fixed_price(self, settings: PricingSettings) -> None:
        assert price_line_item({"type": "fixed", "price": 100}, settings) == Decimal("100")

    def test_hourly_is_hours_times_rate(self, settings: PricingSettings) -> None:
        item = {"type": "hourly", "hours": 2, "rate": 75}
        assert price_line_item(item, settings) == Decimal("150")

    def test_sqft_is_area_times_rate(self, settings: PricingSettings) -> None:
        item = {"type": "sqft", "squareFeet": 250, "ratePerSqft": 1.5}
        assert price_line_item(item, settings) == Decimal("375")

    def test_material_without_markup(self, settings: PricingSettings) -> None:
        item = {"type": "material", "quantity": 2, "unitPrice": 50}
        assert price_line_item(item, settings) == Decimal("100")

    def test_material_markup_applied(self) -> None:
        item = {"type": "material", "quantity": 2, "unitPrice": 50}
        settings = PricingSettings(material_markup=20)
        assert price_line_item(item, settings) == Decimal("120")

    def test_markup_only_touches_materials(self) -> None:
        settings = PricingSettings(material_markup=50)
        assert price_line_item({"type": "fixed", "price": 100}, settings) == Decimal("100")
        assert price_line_item({"type": "hourly", "hours": 1, "rate": 100}, settings) == Decimal("100")
        assert price_line_item(
            {"type": "sqft", "squareFeet": 100, "ratePerSqft": 1}, settings
        ) == Decimal("100")

    def test_negative_markup_discounts_materials(self) -> None:
        item = {"type": "material", "quantity": 1, "unitPrice": 100}
        settings = PricingSettings(material_markup=-10)
        assert price_line_item(item, settings) == Decimal("90")

    def test_accepts_models(self, settings: PricingSettings) -> None:
        item = HourlyLineItem(hours=3, rate=40)
        assert price_line_item(item, settings) == Decimal("120")

    def test_ignores_fields_of_other_modes(self, settings: PricingSettings) -> None:
        item = {"type": "fixed", "price": 10, "hours": 5, "rate": 100, "quantity": 3}
        assert price_line_item(item, settings) == Decimal("10")


class TestUnknownTypes:
    def test_unknown_type_prices_to_zero(self, settings: PricingSettings) -> None:
        assert price_line_item({"type": "widget", "price": 100}, settings) == 0

    def test_missing_type_prices_to_zero(self, settings: PricingSettings) -> None:
        assert price_line_item({"price": 100}, settings) == 0

    def test_non_mapping_prices_to_zero(self, settings: PricingSettings) -> None:
        assert price_line_item(None, settings) == 0


# ---------------------------------------------------------------------------
# Rounding and malformed input
# ---------------------------------------------------------------------------


class TestRounding:
    def test_rounds_to_cents(self, settings: PricingSettings) -> None:
        item = {"type": "hourly", "hours": "1.333", "rate": 10}
        assert price_line_item(item, settings) == Decimal("13.33")

    def test_half_cent_rounds_up(self, settings: PricingSettings) -> None:
        assert price_line_item({"type": "fixed", "price": "0.125"}, settings) == Decimal("0.13")

    def test_marked_up_material_rounds_once(self) -> None:
        # 3 x 9.99 = 29.97, x 1.15 = 34.4655
        item = {"type": "material", "quantity": 3, "unitPrice": 9.99}
        settings = PricingSettings(material_markup=15)
        assert price_line_item(item, settings) == Decimal("34.47")

    def test_float_inputs_do_not_drift(self, settings: PricingSettings) -> None:
        item = {"type": "sqft", "squareFeet": 3, "ratePerSqft": 0.1}
        assert price_line_item(item, settings) == Decimal("0.30")


class TestMalformedInput:
    @pytest.mark.parametrize(
        "bad_value",
        [None, "", "abc", float("nan"), float("inf"), -50, True, [1, 2]],
    )
    def test_malformed_price_is_zero(self, settings: PricingSettings, bad_value: object) -> None:
        assert price_line_item({"type": "fixed", "price": bad_value}, settings) == 0

    def test_missing_rate_is_zero(self, settings: PricingSettings) -> None:
        assert price_line_item({"type": "hourly", "hours": 4}, settings) == 0

    def test_numeric_strings_are_parsed(self, settings: PricingSettings) -> None:
        assert price_line_item({"type": "fixed", "price": " 42.50 "}, settings) == Decimal("42.50")

    def test_read_only_mapping_is_priced(self, settings: PricingSettings) -> None:
        item = MappingProxyType({"type": "fixed", "price": 100})
        assert price_line_item(item, settings) == Decimal("100")

    def test_non_mapping_object_prices_to_zero(self, settings: PricingSettings) -> None:
        assert price_line_item(SimpleNamespace(type="fixed", price=100), settings) == 0


class TestLargeValues:
    @pytest.mark.parametrize("huge", ["1e27", 1e27, "9" * 27, 10**13])
    def test_out_of_range_price_is_zero(self, settings: PricingSettings, huge: object) -> None:
        assert price_line_item({"type": "fixed", "price": huge}, settings) == 0

    def test_out_of_range_hours_are_zero(self, settings: PricingSettings) -> None:
        item = {"type": "hourly", "hours": 1e14, "rate": 1e14}
        assert price_line_item(item, settings) == 0

    def test_largest_hours_times_rate_is_priced(self, settings: PricingSettings) -> None:
        biggest = 9_999_999_999_999
        item = {"type": "hourly", "hours": biggest, "rate": biggest}
        assert price_line_item(item, settings) == Decimal(biggest) * Decimal(biggest)

    def test_huge_marked_up_material_still_rounds(self) -> None:
        settings = PricingSettings(material_markup=9_999_999_999_999)
        item = {"type": "material", "quantity": 9e12, "unitPrice": 9e12}
        amount = price_line_item(item, settings)
        assert amount.is_finite()
        assert amount > Decimal("1e36")


class TestPriceLineItems:
    def test_keeps_input_order(self, settings: PricingSettings) -> None:
        totals = price_line_items(
            [
                {"id": "a", "name": "Fee", "type": "fixed", "price": 25},
                {"id": "b", "name": "Labor", "type": "hourly", "hours": 2, "rate": 60},
                {"id": "c", "type": "mystery"},
            ],
            settings,
        )
        assert [t.id for t in totals] == ["a", "b", "c"]
        assert [t.amount for t in totals] == [Decimal("25"), Decimal("120"), Decimal("0")]
        assert totals[1].name == "Labor"
        assert totals[1].type == "hourly"
        assert totals[2].type == "mystery"


# ---------------------------------------------------------------------------
# Labor hours
# ---------------------------------------------------------------------------


class TestRoundLaborHours:
    @pytest.mark.parametrize(
        ("hours", "rule", "expected"),
        [
            (1.2, "0.5", Decimal("1.5")),
            (1.2, "0.25", Decimal("1.25")),
            (1.2, "1", Decimal("2")),
            (1.2, "none", Decimal("1.2")),
            (2, "0.5", Decimal("2")),
            (1.5, "0.5", Decimal("1.5")),
            (0, "0.25", Decimal("0")),
        ],
    )
    def test_rounds_up_to_interval(self, hours: float, rule: str, expected: Decimal) -> None:
        assert round_labor_hours(hours, rule) == expected

    def test_default_rule_is_half_hour(self) -> None:
        assert round_labor_hours(0.1) == Decimal("0.5")

    def test_malformed_hours_are_zero(self) -> None:
        assert round_labor_hours(None, LaborRounding.HOUR) == 0

    def test_unknown_rule_raises(self) -> None:
        with pytest.raises(ValueError):
            round_labor_hours(1, "0.3")


class TestNormalizeLaborHours:
    def test_rounds_hourly_items(self) -> None:
        settings = PricingSettings(labor_rounding="0.5")
        item = normalize_labor_hours({"type": "hourly", "hours": 1.2, "rate": 100}, settings)
        assert isinstance(item, HourlyLineItem)
        assert item.hours == Decimal("1.5")
        assert item.rate == Decimal("100")

    def test_other_items_unchanged(self) -> None:
        settings = PricingSettings(labor_rounding="1")
        item = FixedLineItem(price=10)
        assert normalize_labor_hours(item, settings) is item

    def test_no_rounding_rule_keeps_hours(self) -> None:
        settings = PricingSettings(labor_rounding="none")
        item = HourlyLineItem(hours="1.2", rate=100)
        assert normalize_labor_hours(item, settings) is item

    def test_pricing_never_rounds_hours(self) -> None:
        settings = PricingSettings(labor_rounding="1")
        item = {"type": "hourly", "hours": 1.2, "rate": 100}
        assert price_line_item(item, settings) == Decimal("120")

    @pytest.mark.parametrize(
        ("rule", "expected"),
        [("0.25", Decimal("1.25")), ("0.5", Decimal("1.5")), ("1", Decimal("2"))],
    )
    def test_rounds_to_settings_step(self, rule: str, expected: Decimal) -> None:
        settings = PricingSettings(labor_rounding=rule)
        item = normalize_labor_hours({"type": "hourly", "hours": "1.1", "rate": 10}, settings)
        assert item.hours == expected
        assert item.hours % settings.labor_step == 0  # type: ignore[operator]
