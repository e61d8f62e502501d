"""Enums for the quotekit domain models."""

from enum import StrEnum


class LineItemType(StrEnum):
    """Pricing model of a line item."""

    FIXED = "fixed"
    HOURLY = "hourly"
    SQFT = "sqft"
    MATERIAL = "material"


class LaborRounding(StrEnum):
    """Granularity that labor hours are rounded up to."""

    QUARTER_HOUR = "0.25"
    HALF_HOUR = "0.5"
    HOUR = "1"
    NONE = "none"
