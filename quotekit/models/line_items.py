"""Line item models, one per pricing mode.

A line item is a tagged union keyed on ``type``. Each variant carries only
the fields its pricing mode reads, so a fixed-price item has no ``hours``
and a material item has no ``price``. Anything whose ``type`` is missing or
unrecognised validates to :class:`UnpricedLineItem`, which is worth nothing.

Field names are snake_case in Python; the camelCase names an editor sends
(``squareFeet``, ``ratePerSqft``, ``unitPrice``) are accepted as aliases.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Tag,
    TypeAdapter,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from quotekit.models.enums import LineItemType
from quotekit.money import ZERO, Amount

logger = logging.getLogger(__name__)

_UNPRICED_TAG = "unpriced"
_PRICED_TYPES = frozenset(t.value for t in LineItemType)


class _LineItemBase(BaseModel):
    """Fields shared by every pricing mode."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    id: int | str | None = None
    name: str = ""
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _mapping_as_dict(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and not isinstance(data, dict):
            return dict(data)
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_int_or_str(cls, v: Any) -> Any:
        if v is None or (isinstance(v, (int, str)) and not isinstance(v, bool)):
            return v
        return str(v)

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_str(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("description", mode="before")
    @classmethod
    def _description_as_str(cls, v: Any) -> str | None:
        return None if v is None else str(v)

    @property
    def base_amount(self) -> Decimal:
        """Unrounded extended amount before any markup."""
        return ZERO


class FixedLineItem(_LineItemBase):
    """A flat price, e.g. a permit fee or a service call."""

    type: Literal["fixed"] = "fixed"
    price: Amount = ZERO

    @property
    def base_amount(self) -> Decimal:
        return self.price


class HourlyLineItem(_LineItemBase):
    """Labor billed by the hour."""

    type: Literal["hourly"] = "hourly"
    hours: Amount = ZERO
    rate: Amount = ZERO

    @property
    def base_amount(self) -> Decimal:
        return self.hours * self.rate


class SquareFootLineItem(_LineItemBase):
    """Work billed by area, e.g. painting or carpet cleaning."""

    type: Literal["sqft"] = "sqft"
    square_feet: Amount = ZERO
    rate_per_sqft: Amount = ZERO

    @property
    def base_amount(self) -> Decimal:
        return self.square_feet * self.rate_per_sqft


class MaterialLineItem(_LineItemBase):
    """Supplies billed per unit; the quote's material markup applies."""

    type: Literal["material"] = "material"
    quantity: Amount = ZERO
    unit_price: Amount = ZERO

    @property
    def base_amount(self) -> Decimal:
        return self.quantity * self.unit_price


class UnpricedLineItem(_LineItemBase):
    """A line item with a missing or unknown ``type``. Prices to zero."""

    type: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _mapping_or_empty(cls, data: Any) -> Any:
        if isinstance(data, _LineItemBase):
            return data
        if isinstance(data, Mapping):
            return dict(data)
        logger.debug("Line item %r is not a mapping; treating it as empty", data)
        return {}

    @field_validator("type", mode="before")
    @classmethod
    def _type_as_str(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None


def _line_item_tag(value: Any) -> str:
    # Only mappings and line item models carry a type; anything else is unpriced.
    if isinstance(value, UnpricedLineItem):
        return _UNPRICED_TAG
    if isinstance(value, Mapping):
        raw = value.get("type")
    elif isinstance(value, _LineItemBase):
        raw = getattr(value, "type", None)
    else:
        raw = None
    if isinstance(raw, str) and raw in _PRICED_TYPES:
        return str(raw)
    return _UNPRICED_TAG


LineItem = Annotated[
    Union[
        Annotated[FixedLineItem, Tag(LineItemType.FIXED.value)],
        Annotated[HourlyLineItem, Tag(LineItemType.HOURLY.value)],
        Annotated[SquareFootLineItem, Tag(LineItemType.SQFT.value)],
        Annotated[MaterialLineItem, Tag(LineItemType.MATERIAL.value)],
        Annotated[UnpricedLineItem, Tag(_UNPRICED_TAG)],
    ],
    Discriminator(_line_item_tag),
]

LINE_ITEM_CLASSES: tuple[type[_LineItemBase], ...] = (
    FixedLineItem,
    HourlyLineItem,
    SquareFootLineItem,
    MaterialLineItem,
    UnpricedLineItem,
)

_LINE_ITEM_ADAPTER: TypeAdapter[Any] = TypeAdapter(LineItem)


def parse_line_item(data: Any) -> LineItem:
    """Validate a mapping (or an existing model) into a line item variant."""
    if isinstance(data, LINE_ITEM_CLASSES):
        return data
    item = _LINE_ITEM_ADAPTER.validate_python(data)
    if isinstance(item, UnpricedLineItem):
        logger.debug("Line item %r has unknown type %r", item.id, item.type)
    return item


def parse_line_items(data: Iterable[Any] | None) -> list[LineItem]:
    """Validate a sequence of line items. ``None`` is an empty quote."""
    if data is None:
        return []
    return [parse_line_item(entry) for entry in data]
