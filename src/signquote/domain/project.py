"""Project domain service."""

import logging
from datetime import date
from typing import Optional

from signquote.database.base import Database
from signquote.domain.entities import Project as ProjectEntity, ProjectStatus
from signquote.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    duplicate_project_name,
    project_delete_blocked,
    project_not_found,
)

logger = logging.getLogger(__name__)


def parse_project_status(status: str | ProjectStatus) -> ProjectStatus:
    """Convert a status name to ProjectStatus.

    Raises:
        ValidationError: If the status is unknown
    """
    try:
        return ProjectStatus(status)
    except ValueError:
        valid = ", ".join(s.value for s in ProjectStatus)
        raise ValidationError(f"Unknown project status '{status}'. Valid: {valid}")


class ProjectService:
    """Service for managing projects."""

    def __init__(self, db: Database):
        """Initialize project service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_project(
        self,
        name: str,
        client: Optional[str] = None,
        description: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> int:
        """Create a new project.

        Args:
            name: Project name (unique)
            client: Optional client name
            description: Optional description
            start_date: Optional planned start
            end_date: Optional planned end

        Returns:
            Project ID

        Raises:
            ValidationError: If the name is blank or the dates are reversed
            ConflictError: If a project with the same name exists
        """
        if not name or not name.strip():
            raise ValidationError("Project name is required")
        name = name.strip()

        if start_date is not None and end_date is not None and end_date < start_date:
            raise ValidationError(
                f"Project end date {end_date} is before start date {start_date}"
            )

        if self.db.get_project_by_name(name) is not None:
            raise ConflictError(duplicate_project_name(name))

        project_id = self.db.create_project(
            name=name,
            client=client,
            description=description,
            status=ProjectStatus.DRAFT.value,
            start_date=start_date,
            end_date=end_date,
        )
        logger.info("Created project %s (%s)", project_id, name)
        return project_id

    def get_project(self, project_id: int) -> Optional[ProjectEntity]:
        """Get project by ID.

        Returns:
            Project entity or None if not found
        """
        return self.db.get_project(project_id)

    def require_project(self, project_id: int) -> ProjectEntity:
        """Get project by ID or raise NotFoundError."""
        project = self.db.get_project(project_id)
        if project is None:
            raise NotFoundError(project_not_found(project_id))
        return project

    def list_projects(self) -> list[ProjectEntity]:
        """List all projects ordered by name."""
        return self.db.list_projects()

    def set_status(self, project_id: int, status: str | ProjectStatus) -> None:
        """Change a project's status.

        Raises:
            ValidationError: If the status is unknown
            NotFoundError: If the project does not exist
        """
        new_status = parse_project_status(status)
        self.require_project(project_id)
        self.db.update_project_status(project_id, new_status.value)
        logger.info("Project %s status set to %s", project_id, new_status.value)

    def delete_project(self, project_id: int) -> None:
        """Delete a project that owns no budgets.

        Raises:
            NotFoundError: If the project does not exist
            DependencyError: If the project still has budget documents
        """
        self.require_project(project_id)

        budget_count = self.db.get_project_budget_count(project_id)
        if budget_count > 0:
            raise DependencyError(project_delete_blocked(project_id, budget_count))

        self.db.delete_project(project_id)
        logger.info("Deleted project %s", project_id)
