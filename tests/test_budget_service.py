"""Tests for BudgetService."""

import logging
import pytest
from datetime import date
from decimal import Decimal

from signquote.domain.entities import BudgetStatus
from signquote.domain.errors import NotFoundError, ValidationError


class TestBudgetDocuments:
    """Tests for budget document operations."""

    def test_create_budget_defaults(self, sample_budget, sample_project):
        assert sample_budget.project_id == sample_project.id
        assert sample_budget.version == 1
        assert sample_budget.iva_pct == Decimal("0.1")
        assert sample_budget.discount_doc == 0
        assert sample_budget.status is BudgetStatus.DRAFT
        assert sample_budget.issue_date == date(2023, 5, 15)

    def test_create_budget_issue_date_defaults_to_today(self, budget_service, sample_project):
        document_id = budget_service.create_budget(
            project_id=sample_project.id, name="Totem", client="ABC"
        )
        assert budget_service.get_budget(document_id).issue_date == date.today()

    def test_create_budget_for_missing_project(self, budget_service):
        with pytest.raises(NotFoundError):
            budget_service.create_budget(project_id=999, name="X", client="ABC")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"name": " "},
            {"client": ""},
            {"version": 0},
            {"discount_doc": Decimal("-1")},
            {"iva_pct": Decimal("1.5")},
        ],
    )
    def test_create_budget_validation(self, budget_service, sample_project, kwargs):
        values = {"project_id": sample_project.id, "name": "Totem", "client": "ABC"}
        values.update(kwargs)
        with pytest.raises(ValidationError):
            budget_service.create_budget(**values)

    def test_list_budgets_newest_first(self, budget_service, sample_project):
        budget_service.create_budget(
            project_id=sample_project.id, name="Old", client="ABC", issue_date=date(2022, 1, 1)
        )
        budget_service.create_budget(
            project_id=sample_project.id, name="New", client="ABC", issue_date=date(2024, 1, 1)
        )

        names = [d.name for d in budget_service.list_budgets(project_id=sample_project.id)]
        assert names == ["New", "Old"]

    def test_update_terms_keeps_unset_term(self, budget_service, sample_budget):
        budget_service.update_terms(sample_budget.id, discount_doc=Decimal("500000"))

        document = budget_service.get_budget(sample_budget.id)
        assert document.discount_doc == Decimal("500000")
        assert document.iva_pct == Decimal("0.1")

    def test_set_status(self, budget_service, sample_budget):
        budget_service.set_status(sample_budget.id, "approved")
        assert budget_service.get_budget(sample_budget.id).status is BudgetStatus.APPROVED

    def test_delete_budget_removes_items(self, budget_service, sample_budget, sample_items):
        budget_service.delete_budget(sample_budget.id)

        assert budget_service.get_budget(sample_budget.id) is None
        assert all(budget_service.get_item(i) is None for i in sample_items)


class TestSummary:
    """Tests for document totals."""

    def test_summary_of_sample_lines(self, budget_service, sample_budget, sample_items):
        summary = budget_service.get_summary(sample_budget.id)

        assert summary.subtotal == Decimal("12600000")
        assert summary.tax == Decimal("1260000")
        assert summary.total == Decimal("13860000")

    def test_summary_of_empty_budget(self, budget_service, sample_budget):
        budget_service.update_terms(sample_budget.id, discount_doc=Decimal("1000"))

        summary = budget_service.get_summary(sample_budget.id)
        assert summary.subtotal == 0
        assert summary.tax == 0
        assert summary.total == Decimal("-1000")

    def test_summary_follows_terms(self, budget_service, sample_budget, sample_items):
        budget_service.update_terms(
            sample_budget.id, discount_doc=Decimal("600000"), iva_pct=Decimal("0.05")
        )

        summary = budget_service.get_summary(sample_budget.id)
        assert summary.tax == Decimal("630000")
        assert summary.total == Decimal("12630000")

    def test_summary_follows_item_edits(self, budget_service, sample_budget, sample_items):
        budget_service.delete_item(sample_items[1])

        assert budget_service.get_summary(sample_budget.id).subtotal == Decimal("5000000")

    def test_summary_missing_budget(self, budget_service):
        with pytest.raises(NotFoundError):
            budget_service.get_summary(999)


class TestLines:
    """Tests for line operations."""

    def test_add_item_computes_derived_fields(self, budget_service, sample_items):
        letters = budget_service.get_item(sample_items[1])

        assert letters.line_number == 2
        assert letters.category == "corporeo"
        assert letters.area_m2 == Decimal("2")
        assert letters.area_m2_rounded == Decimal("2")
        assert letters.line_total == Decimal("7600000")

    def test_add_item_defaults(self, budget_service, sample_budget):
        item_id = budget_service.add_item(sample_budget.id, description="Instalación")

        line = budget_service.get_item(item_id)
        assert line.category == "otros"
        assert line.quantity == 1
        assert line.faces == 1
        assert line.line_total == 0

    def test_add_item_to_missing_budget(self, budget_service):
        with pytest.raises(NotFoundError):
            budget_service.add_item(999, height_cm=1, width_cm=1)

    def test_add_item_rejects_invalid_input(self, budget_service, sample_budget, caplog):
        with caplog.at_level(logging.WARNING, logger="signquote.domain.budget"):
            with pytest.raises(ValidationError, match="height_cm"):
                budget_service.add_item(sample_budget.id, height_cm=Decimal("-10"), width_cm=10)

        assert "Rejected new line" in caplog.text
        assert budget_service.list_items(sample_budget.id) == []

    def test_add_item_rejects_zero_faces(self, budget_service, sample_budget):
        with pytest.raises(ValidationError, match="faces"):
            budget_service.add_item(sample_budget.id, faces=0)

    def test_update_item_recomputes(self, budget_service, sample_items):
        updated = budget_service.update_item(
            sample_items[0], height_cm=Decimal("55"), width_cm=Decimal("55"),
            unit_price=Decimal("1000000"),
        )

        assert updated.area_m2 == Decimal("0.3025")
        assert updated.area_m2_rounded == Decimal("0.5")
        assert updated.line_total.quantize(Decimal("0.01")) == Decimal("1652892.56")
        assert budget_service.get_item(sample_items[0]).line_total == updated.line_total

    def test_update_item_keeps_other_fields(self, budget_service, sample_items):
        updated = budget_service.update_item(sample_items[1], quantity=Decimal("5"))

        assert updated.description == "Letras Corpóreas"
        assert updated.discount_pct == Decimal("0.05")
        assert updated.line_total == Decimal("3800000")

    @pytest.mark.parametrize("field", ["line_total", "area_m2", "area_m2_rounded"])
    def test_update_item_rejects_derived_fields(self, budget_service, sample_items, field):
        with pytest.raises(ValidationError, match="Derived"):
            budget_service.update_item(sample_items[0], **{field: Decimal("1")})

    def test_update_item_rejects_unknown_field(self, budget_service, sample_items):
        with pytest.raises(ValidationError, match="Unknown"):
            budget_service.update_item(sample_items[0], document_id=5)

    def test_update_item_invalid_value_leaves_line(self, budget_service, sample_items):
        with pytest.raises(ValidationError):
            budget_service.update_item(sample_items[0], discount_pct=Decimal("1"))

        assert budget_service.get_item(sample_items[0]).discount_pct == 0

    def test_update_missing_item(self, budget_service):
        with pytest.raises(NotFoundError):
            budget_service.update_item(999, quantity=Decimal("2"))

    def test_grouped_items(self, budget_service, sample_budget, sample_items):
        budget_service.add_item(sample_budget.id, description="Vinilo", category="vinilo")

        groups = budget_service.grouped_items(sample_budget.id)
        assert [g.label for g in groups] == ["Carteles", "Letras Corpóreas", "Vinilos"]
        assert groups[1].items[0].id == sample_items[1]

    def test_renumber_after_delete(self, budget_service, sample_budget, sample_items):
        third = budget_service.add_item(sample_budget.id, description="Vinilo")
        budget_service.delete_item(sample_items[0])

        changed = budget_service.renumber_items(sample_budget.id)

        assert changed == 2
        numbers = [(i.id, i.line_number) for i in budget_service.list_items(sample_budget.id)]
        assert numbers == [(sample_items[1], 1), (third, 2)]
        assert budget_service.renumber_items(sample_budget.id) == 0

    def test_delete_missing_item(self, budget_service):
        with pytest.raises(NotFoundError):
            budget_service.delete_item(999)


class TestStoredPrecision:
    """Tests that lines are priced from the inputs as they are stored."""

    def test_update_item_returns_stored_line(self, budget_service, sample_budget, sample_items):
        returned = budget_service.update_item(
            sample_items[0],
            discount_pct=Decimal("0.12345"),
            unit_price=Decimal("1000000.555"),
        )
        stored = budget_service.get_item(sample_items[0])

        assert returned.discount_pct == Decimal("0.1235")
        assert returned.unit_price == Decimal("1000000.56")
        assert returned.line_total == stored.line_total
        assert stored.discount_pct == Decimal("0.1235")

    def test_summary_matches_printed_line_total(self, budget_service, sample_budget, sample_items):
        returned = budget_service.update_item(
            sample_items[0], quantity=Decimal("1.23456"), unit_price=Decimal("999.999")
        )
        letters = budget_service.get_item(sample_items[1])

        summary = budget_service.get_summary(sample_budget.id)
        assert summary.subtotal == returned.line_total + letters.line_total

    def test_add_item_rounds_inputs(self, budget_service, sample_budget):
        item_id = budget_service.add_item(
            sample_budget.id,
            height_cm=Decimal("55.00005"),
            width_cm=Decimal("55"),
            unit_price=Decimal("1000.005"),
            discount_pct=Decimal("0.04999"),
        )

        line = budget_service.get_item(item_id)
        assert line.height_cm == Decimal("55.0001")
        assert line.unit_price == Decimal("1000.01")
        assert line.discount_pct == Decimal("0.0500")

    def test_discount_rounding_up_to_one_rejected(self, budget_service, sample_budget):
        with pytest.raises(ValidationError, match="discount_pct"):
            budget_service.add_item(sample_budget.id, discount_pct=Decimal("0.99999"))

    def test_terms_rounded(self, budget_service, sample_budget):
        budget_service.update_terms(
            sample_budget.id, discount_doc=Decimal("100.005"), iva_pct=Decimal("0.123456")
        )

        document = budget_service.get_budget(sample_budget.id)
        assert document.discount_doc == Decimal("100.01")
        assert document.iva_pct == Decimal("0.1235")

    def test_huge_input_rejected(self, budget_service, sample_budget):
        with pytest.raises(ValidationError, match="too large"):
            budget_service.add_item(sample_budget.id, height_cm=Decimal("1e600000"), width_cm=1)

        assert budget_service.list_items(sample_budget.id) == []


def test_add_item_after_delete_uses_next_free_number(budget_service, sample_budget, sample_items):
    third = budget_service.add_item(sample_budget.id, description="Vinilo")
    budget_service.delete_item(sample_items[0])

    fourth = budget_service.add_item(sample_budget.id, description="Instalación")

    numbers = [i.line_number for i in budget_service.list_items(sample_budget.id)]
    assert numbers == [2, 3, 4]
    assert budget_service.get_item(third).line_number == 3
    assert budget_service.get_item(fourth).line_number == 4
