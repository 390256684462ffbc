"""Display formatting for guaraní amounts, areas and percentages."""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

from signquote.domain.pricing import to_decimal


def _to_whole(value: Decimal) -> Decimal:
    """Round half-up to an integer, keeping every integer digit."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def format_guarani(amount: Any) -> str:
    """Format an amount as guaraníes with no fractional digits.

    Examples:
        13860000 -> "Gs. 13.860.000"
        -2500.5  -> "-Gs. 2.501"
    """
    value = _to_whole(to_decimal("amount", amount))
    sign = "-" if value < 0 else ""
    digits = f"{value.copy_abs():,}".replace(",", ".")
    return f"{sign}Gs. {digits}"


def format_area(area_m2: Any) -> str:
    """Format an area in m² with two decimals."""
    return f"{to_decimal('area', area_m2):.2f}"


def format_percent(fraction: Any) -> str:
    """Format a fraction as a whole percentage (0.05 -> "5%")."""
    value = _to_whole(to_decimal("percent", fraction) * 100)
    return f"{value}%"
