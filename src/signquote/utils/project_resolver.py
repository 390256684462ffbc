"""Utility for resolving project names to IDs."""

from signquote.domain.errors import NotFoundError
from signquote.domain.project import ProjectService


def resolve_project(project_service: ProjectService, project: str | int) -> int:
    """Resolve project name or ID to project ID.

    Args:
        project_service: ProjectService instance
        project: Project name (str) or ID (int or string representation of int)

    Returns:
        Project ID

    Raises:
        NotFoundError: If project is not found
    """
    if isinstance(project, int):
        if project_service.get_project(project) is None:
            raise NotFoundError(f"Project ID {project} not found")
        return project

    # Try to parse as integer (handles string IDs like "1")
    try:
        project_id = int(project)
    except (ValueError, TypeError):
        project_id = None

    if project_id is not None:
        if project_service.get_project(project_id) is None:
            raise NotFoundError(f"Project ID {project_id} not found")
        return project_id

    for proj in project_service.list_projects():
        if proj.name == project:
            return proj.id

    raise NotFoundError(f"Project '{project}' not found")
