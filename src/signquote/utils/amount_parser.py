"""Amount, percentage and measurement parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from signquote.domain.errors import ValidationError

# "1.500.000" style guaraní amounts: dots only as thousands separators
_DOTTED_THOUSANDS = re.compile(r"^-?\d{1,3}(\.\d{3}){2,}$")


def parse_number(number_str: str) -> Decimal:
    """Parse a plain number such as a dimension or quantity.

    Handles "123", "123.45", "1,234.5" and "-2".

    Raises:
        ValidationError: If the string is empty or not a finite number
    """
    if number_str is None or not str(number_str).strip():
        raise ValidationError("Empty number string")

    cleaned = str(number_str).strip().replace(",", "").replace(" ", "")

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValidationError(f"Could not parse number '{number_str}'")
    if not value.is_finite():
        raise ValidationError(f"Could not parse number '{number_str}'")
    return value


def parse_amount(amount_str: str) -> Decimal:
    """Parse a money amount in guaraníes into a Decimal.

    Handles various formats:
    - "5000000"
    - "Gs. 5000000" / "₲ 5000000"
    - "1,500,000"
    - "1.500.000" (dots as thousands separators, two or more groups)
    - "(1500)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if amount_str is None or not amount_str.strip():
        raise ValidationError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"(?i)gs\.?|[₲$]", "", amount_str).strip()

    if _DOTTED_THOUSANDS.match(amount_str):
        amount_str = amount_str.replace(".", "")

    amount = parse_number(amount_str)
    return -amount if is_negative else amount


def parse_percent(percent_str: str) -> Decimal:
    """Parse a percentage into a fraction.

    "5%" and "5 %" give 0.05; a bare number is taken as a fraction already
    ("0.05" gives 0.05).

    Raises:
        ValidationError: If the string cannot be parsed
    """
    if percent_str is None or not percent_str.strip():
        raise ValidationError("Empty percentage string")

    percent_str = percent_str.strip()
    if percent_str.endswith("%"):
        return parse_number(percent_str[:-1]) / Decimal("100")
    return parse_number(percent_str)
