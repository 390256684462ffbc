"""Category labels and grouping of budget lines."""

from typing import Iterable

from signquote.domain.entities import BudgetLineItem, CategoryGroup

DEFAULT_CATEGORY = "otros"

# Known category tags and their display labels
CATEGORIES = [
    ("corporeo", "Letras Corpóreas"),
    ("cartel", "Carteles"),
    ("material", "Materiales"),
    ("vinilo", "Vinilos"),
    ("otros", "Otros"),
]

_LABELS = dict(CATEGORIES)


def normalize_category(category: str | None) -> str:
    """Return the tag used for grouping; blank tags become the default."""
    if category is None or not category.strip():
        return DEFAULT_CATEGORY
    return category.strip()


def category_label(category: str | None) -> str:
    """Return the display label for a category tag.

    Unknown tags fall back to the label of the default category.
    """
    return _LABELS.get(normalize_category(category), _LABELS[DEFAULT_CATEGORY])


def group_by_category(items: Iterable[BudgetLineItem]) -> list[CategoryGroup]:
    """Group lines by category tag.

    Groups appear in the order their category is first seen, and lines keep
    their relative order inside each group.
    """
    grouped: dict[str, list[BudgetLineItem]] = {}
    for item in items:
        grouped.setdefault(normalize_category(item.category), []).append(item)

    return [
        CategoryGroup(category=category, label=category_label(category), items=tuple(lines))
        for category, lines in grouped.items()
    ]
