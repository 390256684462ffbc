"""Domain model entities for signquote.

These are pure data classes representing business concepts, independent of
database schema. Derived fields on budget lines (areas and line total) are
only ever filled in by the pricing calculator.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class ProjectStatus(str, Enum):
    """Lifecycle states of a project."""

    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BudgetStatus(str, Enum):
    """Lifecycle states of a budget document."""

    DRAFT = "draft"
    APPROVED = "approved"
    REJECTED = "rejected"
    REVISED = "revised"


@dataclass(frozen=True)
class Project:
    """Project domain entity."""

    id: int
    name: str
    client: Optional[str]
    description: Optional[str]
    status: ProjectStatus
    start_date: Optional[date]
    end_date: Optional[date]
    created_at: datetime


@dataclass(frozen=True)
class BudgetDocument:
    """Budget (quote) domain entity.

    Subtotal, tax and total are not stored here; they are derived from the
    document's lines by the aggregator on every read.
    """

    id: int
    project_id: int
    name: str
    client: str
    version: int
    issue_date: date
    discount_doc: Decimal
    iva_pct: Decimal
    status: BudgetStatus
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class BudgetLineItem:
    """One priced row of a budget document.

    ``id`` and ``document_id`` are None for lines that have not been stored
    yet (e.g. when pricing a line from the command line).
    """

    id: Optional[int] = None
    document_id: Optional[int] = None
    line_number: int = 1
    description: str = ""
    category: str = "otros"
    color: str = ""
    faces: int = 1
    height_cm: Decimal = Decimal("0")
    width_cm: Decimal = Decimal("0")
    area_m2: Decimal = Decimal("0")
    area_m2_rounded: Decimal = Decimal("0")
    quantity: Decimal = Decimal("1")
    unit_price: Decimal = Decimal("0")
    discount_pct: Decimal = Decimal("0")
    line_total: Decimal = Decimal("0")


@dataclass(frozen=True)
class LinePricing:
    """Derived values for a single line."""

    area_m2: Decimal
    area_m2_rounded: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class DocumentSummary:
    """Money totals of a budget document."""

    subtotal: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class CategoryGroup:
    """Lines of a document sharing one category tag."""

    category: str
    label: str
    items: tuple[BudgetLineItem, ...] = field(default_factory=tuple)
