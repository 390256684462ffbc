"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the column names of the store
(``doc_id``, ``item_no``, ``qty``, ``total_gs``...) never leak into the domain.
"""

from signquote.domain import entities as domain
from signquote.domain.pricing import recompute
from signquote.database.models import (
    Project as ORMProject,
    BudgetDoc as ORMBudgetDoc,
    BudgetItem as ORMBudgetItem,
)


def project_to_domain(orm_project: ORMProject) -> domain.Project:
    """Convert SQLAlchemy Project model to domain Project entity."""
    return domain.Project(
        id=orm_project.id,
        name=orm_project.name,
        client=orm_project.client,
        description=orm_project.description,
        status=domain.ProjectStatus(orm_project.status),
        start_date=orm_project.start_date,
        end_date=orm_project.end_date,
        created_at=orm_project.created_at,
    )


def budget_to_domain(orm_doc: ORMBudgetDoc) -> domain.BudgetDocument:
    """Convert SQLAlchemy BudgetDoc model to domain BudgetDocument entity."""
    return domain.BudgetDocument(
        id=orm_doc.id,
        project_id=orm_doc.project_id,
        name=orm_doc.name,
        client=orm_doc.client,
        version=orm_doc.version,
        issue_date=orm_doc.issue_date,
        discount_doc=orm_doc.discount_doc,
        iva_pct=orm_doc.iva_pct,
        status=domain.BudgetStatus(orm_doc.status),
        description=orm_doc.description,
        created_at=orm_doc.created_at,
    )


def item_to_domain(orm_item: ORMBudgetItem) -> domain.BudgetLineItem:
    """Convert SQLAlchemy BudgetItem model to domain BudgetLineItem entity.

    Derived fields are recomputed from the stored inputs instead of being read
    back from their (rounded) columns.
    """
    line = domain.BudgetLineItem(
        id=orm_item.id,
        document_id=orm_item.doc_id,
        line_number=orm_item.item_no,
        description=orm_item.description,
        category=orm_item.category,
        color=orm_item.color,
        faces=orm_item.faces,
        height_cm=orm_item.height_cm,
        width_cm=orm_item.width_cm,
        quantity=orm_item.qty,
        unit_price=orm_item.unit_price,
        discount_pct=orm_item.discount_pct,
    )
    return recompute(line)


def apply_item_to_orm(line: domain.BudgetLineItem, orm_item: ORMBudgetItem) -> ORMBudgetItem:
    """Copy a recomputed domain line onto a SQLAlchemy BudgetItem row."""
    orm_item.item_no = line.line_number
    orm_item.description = line.description
    orm_item.category = line.category
    orm_item.color = line.color
    orm_item.faces = line.faces
    orm_item.height_cm = line.height_cm
    orm_item.width_cm = line.width_cm
    orm_item.area_m2 = line.area_m2
    orm_item.area_m2_ceil = line.area_m2_rounded
    orm_item.qty = line.quantity
    orm_item.unit_price = line.unit_price
    orm_item.discount_pct = line.discount_pct
    orm_item.total_gs = line.line_total
    return orm_item
