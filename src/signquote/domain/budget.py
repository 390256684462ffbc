"""Budget domain service."""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from signquote.database.base import Database
from signquote.domain.aggregate import DEFAULT_IVA_PCT, summarize, validate_document_terms
from signquote.domain.categories import group_by_category, normalize_category
from signquote.domain.entities import (
    BudgetDocument,
    BudgetLineItem,
    BudgetStatus,
    CategoryGroup,
    DocumentSummary,
)
from signquote.domain.errors import (
    NotFoundError,
    ValidationError,
    budget_not_found,
    item_not_found,
    project_not_found,
)
from signquote.domain.pricing import DERIVED_FIELDS, recompute, validate_line_inputs

logger = logging.getLogger(__name__)

# Raw line fields a caller may edit; everything else is derived or structural
EDITABLE_FIELDS = frozenset(
    {
        "line_number",
        "description",
        "category",
        "color",
        "faces",
        "height_cm",
        "width_cm",
        "quantity",
        "unit_price",
        "discount_pct",
    }
)


# Decimal places the store keeps for each raw line input
LINE_INPUT_PLACES = {
    "height_cm": 4,
    "width_cm": 4,
    "quantity": 4,
    "unit_price": 2,
    "discount_pct": 4,
}
DISCOUNT_DOC_PLACES = 2
IVA_PCT_PLACES = 4


def parse_budget_status(status: str | BudgetStatus) -> BudgetStatus:
    """Convert a status name to BudgetStatus.

    Raises:
        ValidationError: If the status is unknown
    """
    try:
        return BudgetStatus(status)
    except ValueError:
        valid = ", ".join(s.value for s in BudgetStatus)
        raise ValidationError(f"Unknown budget status '{status}'. Valid: {valid}")


def _positive_int(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{field} must be a positive integer (got {value})")
    return value


def _round_to(value: Decimal, places: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _round_line_inputs(line: BudgetLineItem) -> BudgetLineItem:
    """Round a line's raw inputs to the precision they are stored with.

    Raises:
        ValidationError: If an input is out of range
    """
    values = validate_line_inputs(
        line.height_cm, line.width_cm, line.quantity, line.unit_price, line.discount_pct
    )
    rounded = {
        field: _round_to(value, LINE_INPUT_PLACES[field])
        for field, value in zip(LINE_INPUT_PLACES, values)
    }
    return replace(line, **rounded)


def _round_terms(discount: Decimal, rate: Decimal) -> tuple[Decimal, Decimal]:
    return _round_to(discount, DISCOUNT_DOC_PLACES), _round_to(rate, IVA_PCT_PLACES)


class BudgetService:
    """Service for managing budget documents and their lines."""

    def __init__(self, db: Database):
        """Initialize budget service.

        Args:
            db: Database instance
        """
        self.db = db

    # Documents
    def create_budget(
        self,
        project_id: int,
        name: str,
        client: str,
        version: int = 1,
        issue_date: Optional[date] = None,
        discount_doc: Any = Decimal("0"),
        iva_pct: Any = DEFAULT_IVA_PCT,
        description: Optional[str] = None,
    ) -> int:
        """Create a budget document for a project.

        Args:
            project_id: Owning project ID
            name: Budget name
            client: Client the quote is addressed to
            version: Version number (positive)
            issue_date: Issue date (defaults to today)
            discount_doc: Amount subtracted once from the subtotal
            iva_pct: Tax rate as a fraction
            description: Optional description

        Returns:
            Budget document ID

        Raises:
            NotFoundError: If the project does not exist
            ValidationError: If a required field is blank or a term is out of range
        """
        if self.db.get_project(project_id) is None:
            raise NotFoundError(project_not_found(project_id))
        if not name or not name.strip():
            raise ValidationError("Budget name is required")
        if not client or not client.strip():
            raise ValidationError("Client is required")
        version = _positive_int("version", version)
        discount, rate = _round_terms(*validate_document_terms(discount_doc, iva_pct))

        document_id = self.db.create_budget(
            project_id=project_id,
            name=name.strip(),
            client=client.strip(),
            version=version,
            issue_date=issue_date or date.today(),
            discount_doc=discount,
            iva_pct=rate,
            description=description,
        )
        logger.info("Created budget %s for project %s", document_id, project_id)
        return document_id

    def get_budget(self, document_id: int) -> Optional[BudgetDocument]:
        """Get budget document by ID, or None if not found."""
        return self.db.get_budget(document_id)

    def require_budget(self, document_id: int) -> BudgetDocument:
        """Get budget document by ID or raise NotFoundError."""
        document = self.db.get_budget(document_id)
        if document is None:
            raise NotFoundError(budget_not_found(document_id))
        return document

    def list_budgets(self, project_id: Optional[int] = None) -> list[BudgetDocument]:
        """List budget documents, newest first."""
        return self.db.list_budgets(project_id=project_id)

    def update_terms(
        self,
        document_id: int,
        discount_doc: Any = None,
        iva_pct: Any = None,
    ) -> None:
        """Change the document-level discount and/or tax rate.

        Raises:
            NotFoundError: If the document does not exist
            ValidationError: If a term is out of range
        """
        document = self.require_budget(document_id)
        discount, rate = _round_terms(
            *validate_document_terms(
                document.discount_doc if discount_doc is None else discount_doc,
                document.iva_pct if iva_pct is None else iva_pct,
            )
        )
        self.db.update_budget_terms(document_id, discount_doc=discount, iva_pct=rate)
        logger.info(
            "Budget %s terms set to discount %s, IVA %s", document_id, discount, rate
        )

    def set_status(self, document_id: int, status: str | BudgetStatus) -> None:
        """Change a budget document's status."""
        new_status = parse_budget_status(status)
        self.require_budget(document_id)
        self.db.update_budget_status(document_id, new_status.value)
        logger.info("Budget %s status set to %s", document_id, new_status.value)

    def delete_budget(self, document_id: int) -> None:
        """Delete a budget document and all its lines."""
        self.require_budget(document_id)
        self.db.delete_budget(document_id)
        logger.info("Deleted budget %s", document_id)

    def get_summary(self, document_id: int) -> DocumentSummary:
        """Compute subtotal, tax and total from the document's current lines."""
        document = self.require_budget(document_id)
        return summarize(
            self.db.list_items(document_id),
            discount_doc=document.discount_doc,
            iva_pct=document.iva_pct,
        )

    # Lines
    def list_items(self, document_id: int) -> list[BudgetLineItem]:
        """List a document's lines in display order."""
        self.require_budget(document_id)
        return self.db.list_items(document_id)

    def grouped_items(self, document_id: int) -> list[CategoryGroup]:
        """List a document's lines grouped by category."""
        return group_by_category(self.list_items(document_id))

    def get_item(self, item_id: int) -> Optional[BudgetLineItem]:
        """Get a line by ID, or None if not found."""
        return self.db.get_item(item_id)

    def add_item(
        self,
        document_id: int,
        description: str = "",
        category: Optional[str] = None,
        color: str = "",
        faces: int = 1,
        height_cm: Any = 0,
        width_cm: Any = 0,
        quantity: Any = 1,
        unit_price: Any = 0,
        discount_pct: Any = 0,
    ) -> int:
        """Append a priced line to a document.

        The line is numbered after the highest number in use. Its raw inputs
        are rounded to the precision they are stored with, and its derived
        fields are computed from the rounded values.

        Returns:
            Line ID

        Raises:
            NotFoundError: If the document does not exist
            ValidationError: If an input is out of range
        """
        existing = self.list_items(document_id)
        line = BudgetLineItem(
            document_id=document_id,
            line_number=max((i.line_number for i in existing), default=0) + 1,
            description=description or "",
            category=normalize_category(category),
            color=color or "",
            faces=_positive_int("faces", faces),
            height_cm=height_cm,
            width_cm=width_cm,
            quantity=quantity,
            unit_price=unit_price,
            discount_pct=discount_pct,
        )
        try:
            line = recompute(_round_line_inputs(line))
        except ValidationError as e:
            logger.warning("Rejected new line for budget %s: %s", document_id, e)
            raise

        item_id = self.db.create_item(line)
        logger.info(
            "Added line %s to budget %s (total %s)", item_id, document_id, line.line_total
        )
        return item_id

    def update_item(self, item_id: int, **changes: Any) -> BudgetLineItem:
        """Apply an edit to a stored line and recompute it.

        Args:
            item_id: Line ID
            **changes: New values for editable raw fields

        Returns:
            The recomputed line, read back from the store

        Raises:
            NotFoundError: If the line does not exist
            ValidationError: If a field is derived, unknown or out of range
        """
        derived = DERIVED_FIELDS.intersection(changes)
        if derived:
            raise ValidationError(
                f"Derived fields cannot be set directly: {', '.join(sorted(derived))}"
            )
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown line fields: {', '.join(sorted(unknown))}")

        line = self.db.get_item(item_id)
        if line is None:
            raise NotFoundError(item_not_found(item_id))

        if "faces" in changes:
            _positive_int("faces", changes["faces"])
        if "line_number" in changes:
            _positive_int("line_number", changes["line_number"])
        if "category" in changes:
            changes["category"] = normalize_category(changes["category"])

        try:
            updated = recompute(_round_line_inputs(replace(line, **changes)))
        except ValidationError as e:
            logger.warning("Rejected edit of line %s: %s", item_id, e)
            raise

        self.db.update_item(updated)
        logger.info("Updated line %s (total %s)", item_id, updated.line_total)
        return self.db.get_item(item_id)

    def delete_item(self, item_id: int) -> None:
        """Remove a line from its document."""
        if self.db.get_item(item_id) is None:
            raise NotFoundError(item_not_found(item_id))
        self.db.delete_item(item_id)
        logger.info("Deleted line %s", item_id)

    def renumber_items(self, document_id: int) -> int:
        """Renumber a document's lines 1..n in their current order.

        Returns:
            Number of lines whose number changed
        """
        changed = 0
        for position, line in enumerate(self.list_items(document_id), start=1):
            if line.line_number != position:
                self.db.update_item(replace(line, line_number=position))
                changed += 1
        return changed
