"""Service catalog: reusable priced services a provider adds to quotes."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from quotekit.models.enums import LineItemType
from quotekit.models.line_items import LineItem, parse_line_item
from quotekit.money import Money

# Quantities a freshly added service starts with; the provider edits them.
DEFAULT_SERVICE_HOURS = Decimal("1")
DEFAULT_SERVICE_SQUARE_FEET = Decimal("100")


class CatalogService(BaseModel):
    """One saved service with its going rate."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: int | str
    name: str
    category: str
    type: LineItemType
    description: str = ""
    price: Money | None = None
    rate: Money | None = None
    rate_per_sqft: Money | None = None

    def to_line_item(self) -> LineItem:
        """Build a quote line item priced at this service's rate."""
        data: dict[str, object] = {
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
        }
        if self.type == LineItemType.FIXED:
            data["price"] = self.price
        elif self.type == LineItemType.HOURLY:
            data["rate"] = self.rate
            data["hours"] = DEFAULT_SERVICE_HOURS
        elif self.type == LineItemType.SQFT:
            data["rate_per_sqft"] = self.rate_per_sqft
            data["square_feet"] = DEFAULT_SERVICE_SQUARE_FEET
        return parse_line_item(data)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

SEED_SERVICES: list[CatalogService] = [
    CatalogService(id=1, name="TV Mounting", price=120, type=LineItemType.FIXED, category="Installation"),
    CatalogService(id=2, name="Furniture Assembly", price=80, type=LineItemType.FIXED, category="Assembly"),
    CatalogService(id=3, name="Drywall Patch", price=150, type=LineItemType.FIXED, category="Repair"),
    CatalogService(id=4, name="Lighting Install", rate=75, type=LineItemType.HOURLY, category="Electrical"),
    CatalogService(id=5, name="Paint Touch-up", rate_per_sqft="0.5", type=LineItemType.SQFT, category="Painting"),
    CatalogService(id=6, name="Outlet Installation", price=95, type=LineItemType.FIXED, category="Electrical"),
    CatalogService(id=7, name="Door Installation", price=250, type=LineItemType.FIXED, category="Installation"),
    CatalogService(id=8, name="Carpet Cleaning", rate_per_sqft="0.25", type=LineItemType.SQFT, category="Cleaning"),
]
