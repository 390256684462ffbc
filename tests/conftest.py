"""Shared pytest fixtures for signquote tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from signquote.database.factories import create_sqlite_database
from signquote.domain.budget import BudgetService
from signquote.domain.project import ProjectService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def project_service(temp_db):
    """Create a ProjectService with a temporary database."""
    return ProjectService(temp_db)


@pytest.fixture
def budget_service(temp_db):
    """Create a BudgetService with a temporary database."""
    return BudgetService(temp_db)


@pytest.fixture
def sample_project(project_service):
    """Create a sample project for testing."""
    project_id = project_service.create_project(
        name="Fachada Shopping", client="Corporación ABC"
    )
    return project_service.get_project(project_id)


@pytest.fixture
def sample_budget(budget_service, sample_project):
    """Create an empty budget with 10% IVA and no discount."""
    document_id = budget_service.create_budget(
        project_id=sample_project.id,
        name="Fachada v1",
        client="Corporación ABC",
        issue_date=date(2023, 5, 15),
    )
    return budget_service.get_budget(document_id)


@pytest.fixture
def sample_items(budget_service, sample_budget):
    """Add the sign and the corporeal letters lines; returns their IDs."""
    sign_id = budget_service.add_item(
        sample_budget.id,
        description="Cartel Corporativo",
        category="cartel",
        color="Azul",
        faces=2,
        height_cm=Decimal("200"),
        width_cm=Decimal("300"),
        quantity=Decimal("1"),
        unit_price=Decimal("5000000"),
    )
    letters_id = budget_service.add_item(
        sample_budget.id,
        description="Letras Corpóreas",
        category="corporeo",
        color="Plata",
        height_cm=Decimal("50"),
        width_cm=Decimal("400"),
        quantity=Decimal("10"),
        unit_price=Decimal("800000"),
        discount_pct=Decimal("0.05"),
    )
    return [sign_id, letters_id]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
