"""Project management commands."""

import click
from signquote.cli.error_handling import handle_domain_error
from signquote.cli.project_resolution import resolve_project_or_exit
from signquote.domain.entities import ProjectStatus
from signquote.domain.project import ProjectService
from signquote.utils.date_parser import parse_date


@click.group()
def project_group():
    """Manage projects."""
    pass


@project_group.command("create")
@click.argument("name", metavar="PROJECT_NAME")
@click.option("--client", help="Client name")
@click.option("--description", help="Project description")
@click.option("--start-date", help="Planned start date (YYYY-MM-DD, DD/MM/YYYY or 'today')")
@click.option("--end-date", help="Planned end date (YYYY-MM-DD, DD/MM/YYYY or 'today')")
@click.pass_context
def create_project(
    ctx,
    name: str,
    client: str | None,
    description: str | None,
    start_date: str | None,
    end_date: str | None,
):
    """Create a new project.

    Examples:
        signquote project create "Fachada Shopping"
        signquote project create "Totem Ruta 2" --client "Corporación ABC" --start-date today
    """
    db = ctx.obj["db"]
    service = ProjectService(db)

    try:
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None
        project_id = service.create_project(
            name=name,
            client=client,
            description=description,
            start_date=start,
            end_date=end,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created project '{name}' (ID: {project_id})")


@project_group.command("list")
@click.pass_context
def list_projects(ctx):
    """List all projects."""
    db = ctx.obj["db"]
    service = ProjectService(db)

    projects = service.list_projects()
    if not projects:
        click.echo("No projects found.")
        return

    click.echo("\nProjects:")
    click.echo("-" * 80)
    for proj in projects:
        client = proj.client or "-"
        click.echo(
            f"ID: {proj.id:3d} | {proj.name:25s} | Client: {client:20s} | {proj.status.value}"
        )


@project_group.command("status")
@click.argument("project", metavar="PROJECT")
@click.argument(
    "status",
    type=click.Choice([s.value for s in ProjectStatus], case_sensitive=False),
)
@click.pass_context
def set_project_status(ctx, project: str, status: str) -> None:
    """Change a project's status.

    PROJECT can be a project name or ID.

    Examples:
        signquote project status "Fachada Shopping" active
    """
    db = ctx.obj["db"]
    service = ProjectService(db)
    project_id = resolve_project_or_exit(ctx, service, project)

    try:
        service.set_status(project_id, status.lower())
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Project {project_id} is now {status.lower()}")


@project_group.command("delete")
@click.argument("project", metavar="PROJECT")
@click.pass_context
def delete_project(ctx, project: str) -> None:
    """Delete a project.

    PROJECT can be a project name or ID. The project can only be deleted if
    it has no budgets.
    """
    db = ctx.obj["db"]
    service = ProjectService(db)
    project_id = resolve_project_or_exit(ctx, service, project)
    project_obj = service.get_project(project_id)

    if not click.confirm(
        f"Are you sure you want to delete project '{project_obj.name}' (ID: {project_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_project(project_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted project '{project_obj.name}'")


def register_commands(cli):
    """Register project commands with main CLI."""
    cli.add_command(project_group, name="project")
