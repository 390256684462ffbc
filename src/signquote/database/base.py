"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

from signquote.domain.entities import (
    Project,
    BudgetDocument,
    BudgetLineItem,
)


class Database(ABC):
    """Abstract database interface for signquote."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Project operations
    @abstractmethod
    def create_project(
        self,
        name: str,
        client: Optional[str] = None,
        description: Optional[str] = None,
        status: str = "draft",
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> int:
        """Create a new project. Returns project ID."""
        pass

    @abstractmethod
    def get_project(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        pass

    @abstractmethod
    def get_project_by_name(self, name: str) -> Optional[Project]:
        """Get project by name."""
        pass

    @abstractmethod
    def list_projects(self) -> list[Project]:
        """List all projects."""
        pass

    @abstractmethod
    def update_project_status(self, project_id: int, status: str) -> None:
        """Update project status."""
        pass

    @abstractmethod
    def delete_project(self, project_id: int) -> None:
        """Delete a project."""
        pass

    @abstractmethod
    def get_project_budget_count(self, project_id: int) -> int:
        """Get count of budget documents owned by a project."""
        pass

    # Budget document operations
    @abstractmethod
    def create_budget(
        self,
        project_id: int,
        name: str,
        client: str,
        version: int,
        issue_date: date,
        discount_doc: Decimal,
        iva_pct: Decimal,
        description: Optional[str] = None,
    ) -> int:
        """Create a budget document. Returns document ID."""
        pass

    @abstractmethod
    def get_budget(self, document_id: int) -> Optional[BudgetDocument]:
        """Get budget document by ID."""
        pass

    @abstractmethod
    def list_budgets(self, project_id: Optional[int] = None) -> list[BudgetDocument]:
        """List budget documents, optionally filtered by project."""
        pass

    @abstractmethod
    def update_budget_terms(
        self,
        document_id: int,
        discount_doc: Optional[Decimal] = None,
        iva_pct: Optional[Decimal] = None,
    ) -> None:
        """Update document-level discount and/or tax rate."""
        pass

    @abstractmethod
    def update_budget_status(self, document_id: int, status: str) -> None:
        """Update budget document status."""
        pass

    @abstractmethod
    def delete_budget(self, document_id: int) -> None:
        """Delete a budget document together with its lines."""
        pass

    # Budget line operations
    @abstractmethod
    def create_item(self, line: BudgetLineItem) -> int:
        """Insert a recomputed line. Returns line ID."""
        pass

    @abstractmethod
    def get_item(self, item_id: int) -> Optional[BudgetLineItem]:
        """Get budget line by ID."""
        pass

    @abstractmethod
    def list_items(self, document_id: int) -> list[BudgetLineItem]:
        """List lines of a document ordered by line number."""
        pass

    @abstractmethod
    def update_item(self, line: BudgetLineItem) -> None:
        """Overwrite a stored line with a recomputed one."""
        pass

    @abstractmethod
    def delete_item(self, item_id: int) -> None:
        """Delete a budget line."""
        pass
