"""Line pricing calculator.

Converts a line's raw dimensions, quantity, unit price and discount into its
derived fields: measured area, billable area and line total. Everything here
is pure and works on ``Decimal`` so repeated calls give identical results.
"""

from dataclasses import replace
from decimal import Decimal, DecimalException, InvalidOperation, ROUND_CEILING
from typing import Any

from signquote.domain.entities import BudgetLineItem, LinePricing
from signquote.domain.errors import (
    ValidationError,
    negative_value,
    not_a_number,
    value_too_large,
)

CM2_PER_M2 = Decimal("10000")
# Smallest billable area increment in square meters
AREA_INCREMENT_M2 = Decimal("0.25")

ZERO = Decimal("0")
ONE = Decimal("1")
# Raw line inputs and document discounts must stay below this
MAX_INPUT_VALUE = Decimal("1E10")

DERIVED_FIELDS = frozenset({"area_m2", "area_m2_rounded", "line_total"})


def to_decimal(field: str, value: Any) -> Decimal:
    """Convert a numeric value to a finite Decimal.

    Args:
        field: Field name used in error messages
        value: int, float, str or Decimal

    Returns:
        Decimal value

    Raises:
        ValidationError: If the value is not numeric, NaN or infinite
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(not_a_number(field, value))
    try:
        if isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(not_a_number(field, value))
    if not result.is_finite():
        raise ValidationError(not_a_number(field, value))
    return result


def in_input_range(field: str, value: Any) -> Decimal:
    """Convert a raw input to Decimal and check 0 <= value < MAX_INPUT_VALUE."""
    result = to_decimal(field, value)
    if result < ZERO:
        raise ValidationError(negative_value(field, result))
    if result >= MAX_INPUT_VALUE:
        raise ValidationError(value_too_large(field, result, MAX_INPUT_VALUE))
    return result


def validate_line_inputs(
    height_cm: Any,
    width_cm: Any,
    quantity: Any,
    unit_price: Any,
    discount_pct: Any,
) -> tuple[Decimal, Decimal, Decimal, Decimal, Decimal]:
    """Validate raw pricing inputs and return them as Decimals.

    Raises:
        ValidationError: If a value is negative, non-finite, or the discount
            is not in [0, 1), or a value is not below MAX_INPUT_VALUE
    """
    height = in_input_range("height_cm", height_cm)
    width = in_input_range("width_cm", width_cm)
    qty = in_input_range("quantity", quantity)
    price = in_input_range("unit_price", unit_price)
    discount = in_input_range("discount_pct", discount_pct)
    if discount >= ONE:
        raise ValidationError(
            f"discount_pct must be a fraction below 1 (got {discount})"
        )
    return height, width, qty, price, discount


def area_from_dimensions(height_cm: Decimal, width_cm: Decimal) -> Decimal:
    """Return the measured area in m² of a piece given in centimeters."""
    return (height_cm * width_cm) / CM2_PER_M2


def billable_area(area_m2: Decimal) -> Decimal:
    """Round an area up to the next quarter square meter.

    A zero area stays zero; there is no minimum charge.
    """
    steps = (area_m2 / AREA_INCREMENT_M2).to_integral_value(rounding=ROUND_CEILING)
    return steps * AREA_INCREMENT_M2


def price_line(
    height_cm: Any,
    width_cm: Any,
    quantity: Any = 1,
    unit_price: Any = 0,
    discount_pct: Any = 0,
) -> LinePricing:
    """Compute the derived values of one line.

    The unit price is quoted per measured m², while the customer is billed for
    the rounded-up area, so the nominal amount is rescaled by
    ``area_m2_rounded / area_m2``. With a zero area the ratio is taken as 1.

    Returns:
        LinePricing with area, billable area and line total

    Raises:
        ValidationError: If any input is out of range or the result does not
            fit in a Decimal
    """
    height, width, qty, price, discount = validate_line_inputs(
        height_cm, width_cm, quantity, unit_price, discount_pct
    )

    try:
        area = area_from_dimensions(height, width)
        rounded = billable_area(area)

        nominal = qty * price * (ONE - discount)
        if area > ZERO:
            line_total = nominal * rounded / area
        else:
            line_total = nominal
    except DecimalException as e:
        raise ValidationError(f"Line values are out of range ({type(e).__name__})")

    return LinePricing(area_m2=area, area_m2_rounded=rounded, line_total=line_total)


def recompute(line: BudgetLineItem) -> BudgetLineItem:
    """Return a copy of ``line`` with its derived fields recomputed.

    Raises:
        ValidationError: If the line's raw inputs are out of range
    """
    pricing = price_line(
        height_cm=line.height_cm,
        width_cm=line.width_cm,
        quantity=line.quantity,
        unit_price=line.unit_price,
        discount_pct=line.discount_pct,
    )
    return replace(
        line,
        height_cm=to_decimal("height_cm", line.height_cm),
        width_cm=to_decimal("width_cm", line.width_cm),
        quantity=to_decimal("quantity", line.quantity),
        unit_price=to_decimal("unit_price", line.unit_price),
        discount_pct=to_decimal("discount_pct", line.discount_pct),
        area_m2=pricing.area_m2,
        area_m2_rounded=pricing.area_m2_rounded,
        line_total=pricing.line_total,
    )
