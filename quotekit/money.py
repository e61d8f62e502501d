"""Currency convention and numeric coercion helpers.

All amounts are ``decimal.Decimal`` dollars, rounded half-up to whole cents
(two decimal places) wherever a value leaves a calculation. Callers that
persist amounts as integer cents convert at the boundary with
:func:`to_minor_units`.

Line items arrive straight from an editor, so every numeric field may be
missing, blank, ``NaN``, absurdly large or otherwise malformed. Those values
are coerced to zero instead of raised: the calculations run on every
keystroke and must always return a number.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")
UNIT = Decimal("1")

# Inputs of 1e13 or more are coerced to zero like any other malformed value.
MAX_INPUT_EXPONENT = 12

# Decimal in Python, plain JSON number on the wire.
Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


def to_decimal(value: Any) -> Decimal | None:
    """Parse ``value`` into a finite Decimal, or return None if it can't be.

    Floats go through ``repr`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion. Booleans are rejected even though they are
    ints.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not number.is_finite():
        return None
    return number


def _out_of_range(number: Decimal) -> bool:
    return number.adjusted() > MAX_INPUT_EXPONENT


def coerce_amount(value: Any) -> Decimal:
    """Coerce a line-item quantity or price to a non-negative Decimal.

    Missing, malformed, non-finite, negative and out-of-range values all
    become zero.
    """
    number = to_decimal(value)
    if number is None or number < 0 or _out_of_range(number):
        if value is not None and value != "":
            logger.debug("Coerced malformed amount %r to 0", value)
        return ZERO
    return number


def coerce_rate(value: Any) -> Decimal:
    """Coerce a settings value to a Decimal, keeping its sign.

    Unlike :func:`coerce_amount`, negative values pass through unchanged.
    """
    number = to_decimal(value)
    if number is None or _out_of_range(number):
        if value is not None and value != "":
            logger.debug("Coerced malformed setting %r to 0", value)
        return ZERO
    return number


def round_half_up(value: Decimal, exponent: Decimal = CENT) -> Decimal:
    """Round to ``exponent`` (cents by default), halves away from zero.

    Precision is widened to fit ``value``, so large results round instead
    of raising.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - exponent.as_tuple().exponent + 2)
        return value.quantize(exponent, rounding=ROUND_HALF_UP)


def to_minor_units(amount: Decimal) -> int:
    """Convert a dollar amount to integer cents."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 5)
        return int((amount * HUNDRED).quantize(UNIT, rounding=ROUND_HALF_UP))


# Non-negative quantity or price on a line item; malformed input becomes 0.
Amount = Annotated[
    Decimal,
    BeforeValidator(coerce_amount),
    PlainSerializer(float, return_type=float, when_used="json"),
]

# Signed settings value (percent or currency); malformed input becomes 0.
Rate = Annotated[
    Decimal,
    BeforeValidator(coerce_rate),
    PlainSerializer(float, return_type=float, when_used="json"),
]
