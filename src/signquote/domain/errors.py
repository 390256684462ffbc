"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def project_not_found(project_id: int) -> str:
    """Return message for missing project."""
    return f"Project {project_id} not found"


def budget_not_found(document_id: int) -> str:
    """Return message for missing budget document."""
    return f"Budget {document_id} not found"


def item_not_found(item_id: int) -> str:
    """Return message for missing budget line."""
    return f"Budget item {item_id} not found"


def duplicate_project_name(name: str) -> str:
    """Return message for duplicate project name."""
    return f"Project with name '{name}' already exists"


def negative_value(field: str, value) -> str:
    """Return message for a field that must not be negative."""
    return f"{field} must not be negative (got {value})"


def not_a_number(field: str, value) -> str:
    """Return message for a non-finite numeric field."""
    return f"{field} must be a finite number (got {value})"


def project_delete_blocked(project_id: int, budget_count: int) -> str:
    """Return message when a project still owns budget documents."""
    return (
        f"Cannot delete project {project_id}: it has "
        f"{budget_count} budget{'s' if budget_count != 1 else ''}. "
        "Please delete them first."
    )


def value_too_large(field: str, value, limit) -> str:
    """Return message for a value at or above its upper bound."""
    return f"{field} is too large (got {value}, must be below {limit:,f})"
