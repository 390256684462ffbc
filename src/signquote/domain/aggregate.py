"""Document aggregator: subtotal, IVA and total of a budget."""

import logging
from decimal import Decimal, DecimalException
from typing import Any, Iterable

from signquote.domain.entities import BudgetLineItem, DocumentSummary
from signquote.domain.errors import ValidationError
from signquote.domain.pricing import ONE, ZERO, in_input_range, to_decimal

logger = logging.getLogger(__name__)

DEFAULT_IVA_PCT = Decimal("0.10")


def validate_document_terms(discount_doc: Any, iva_pct: Any) -> tuple[Decimal, Decimal]:
    """Validate a document-level discount and tax rate.

    Raises:
        ValidationError: If the discount is negative or too large, or the rate
            is outside [0, 1]
    """
    discount = in_input_range("discount_doc", discount_doc)
    rate = to_decimal("iva_pct", iva_pct)
    if rate < ZERO or rate > ONE:
        raise ValidationError(f"iva_pct must be between 0 and 1 (got {rate})")
    return discount, rate


def summarize(
    items: Iterable[BudgetLineItem],
    discount_doc: Any = ZERO,
    iva_pct: Any = DEFAULT_IVA_PCT,
) -> DocumentSummary:
    """Summarize a document's lines.

    The discount is subtracted once from the subtotal and the tax is applied
    to the undiscounted subtotal. A total below zero is returned as is.

    Args:
        items: Lines of the document, each with a current ``line_total``
        discount_doc: Amount subtracted once from the subtotal
        iva_pct: Tax rate as a fraction (0.10 = 10%)

    Returns:
        DocumentSummary with subtotal, tax and total
    """
    discount, rate = validate_document_terms(discount_doc, iva_pct)

    try:
        subtotal = sum(
            (to_decimal("line_total", item.line_total) for item in items), ZERO
        )
        tax = subtotal * rate
        total = subtotal - discount + tax
    except DecimalException as e:
        raise ValidationError(f"Document totals are out of range ({type(e).__name__})")

    if total < ZERO:
        logger.warning(
            "Document total is negative (%s): discount %s exceeds subtotal plus tax",
            total,
            discount,
        )

    return DocumentSummary(subtotal=subtotal, tax=tax, total=total)
