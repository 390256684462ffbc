"""Budget document commands."""

import click
from signquote.cli.error_handling import handle_domain_error
from signquote.cli.project_resolution import resolve_project_or_exit
from signquote.domain.budget import BudgetService
from signquote.domain.entities import BudgetStatus, CategoryGroup, DocumentSummary
from signquote.domain.project import ProjectService
from signquote.utils.amount_parser import parse_amount, parse_percent
from signquote.utils.currency import format_area, format_guarani, format_percent
from signquote.utils.date_parser import parse_date

TABLE_WIDTH = 132


def _print_group(group: CategoryGroup) -> None:
    """Print the lines of one category as a table."""
    click.echo(f"\n{group.label}")
    click.echo("-" * TABLE_WIDTH)
    click.echo(
        f"{'No':<4} {'Description':<24} {'Color':<10} {'Faces':>5} {'Height':>8} "
        f"{'Width':>8} {'Area':>7} {'Billed':>7} {'Qty':>6} {'Unit price':>16} "
        f"{'Disc':>5} {'Total':>18}"
    )
    click.echo("-" * TABLE_WIDTH)
    for line in group.items:
        click.echo(
            f"{line.line_number:<4} {line.description[:24]:<24} {line.color[:10]:<10} "
            f"{line.faces:>5} {line.height_cm.normalize():>8f} {line.width_cm.normalize():>8f} "
            f"{format_area(line.area_m2):>7} {format_area(line.area_m2_rounded):>7} "
            f"{line.quantity.normalize():>6f} {format_guarani(line.unit_price):>16} "
            f"{format_percent(line.discount_pct):>5} {format_guarani(line.line_total):>18}"
        )


def _print_summary(summary: DocumentSummary, discount_doc, iva_pct) -> None:
    """Print the subtotal / discount / IVA / total block."""
    click.echo("=" * 40)
    click.echo(f"{'Subtotal:':<20} {format_guarani(summary.subtotal):>19}")
    click.echo(f"{'Discount:':<20} {format_guarani(discount_doc):>19}")
    iva_label = f"IVA ({format_percent(iva_pct)}):"
    click.echo(f"{iva_label:<20} {format_guarani(summary.tax):>19}")
    click.echo("-" * 40)
    click.echo(f"{'TOTAL:':<20} {format_guarani(summary.total):>19}")


@click.group()
def budget_group():
    """Manage budgets (quotes)."""
    pass


@budget_group.command("create")
@click.argument("name", metavar="BUDGET_NAME")
@click.option("--project", required=True, help="Project name or ID")
@click.option("--client", required=True, help="Client the budget is addressed to")
@click.option("--version", type=int, default=1, show_default=True, help="Budget version")
@click.option("--issue-date", help="Issue date (defaults to today)")
@click.option("--discount", help="Document discount amount in guaraníes (e.g. 500000)")
@click.option("--iva", help="IVA rate (e.g. 10% or 0.1; defaults to 10%)")
@click.option("--description", help="Budget description")
@click.pass_context
def create_budget(
    ctx,
    name: str,
    project: str,
    client: str,
    version: int,
    issue_date: str | None,
    discount: str | None,
    iva: str | None,
    description: str | None,
):
    """Create a new budget for a project.

    Examples:
        signquote budget create "Fachada v1" --project "Fachada Shopping" --client "Corporación ABC"
        signquote budget create "Totem" --project 2 --client "ABC" --iva 5% --discount 250000
    """
    db = ctx.obj["db"]
    service = BudgetService(db)
    project_id = resolve_project_or_exit(ctx, ProjectService(db), project)

    kwargs = {}
    try:
        if issue_date:
            kwargs["issue_date"] = parse_date(issue_date)
        if discount:
            kwargs["discount_doc"] = parse_amount(discount)
        if iva:
            kwargs["iva_pct"] = parse_percent(iva)
        document_id = service.create_budget(
            project_id=project_id,
            name=name,
            client=client,
            version=version,
            description=description,
            **kwargs,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created budget '{name}' (ID: {document_id})")


@budget_group.command("list")
@click.option("--project", help="Only budgets of this project (name or ID)")
@click.pass_context
def list_budgets(ctx, project: str | None):
    """List budgets with their totals."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    project_id = None
    if project is not None:
        project_id = resolve_project_or_exit(ctx, ProjectService(db), project)

    budgets = service.list_budgets(project_id=project_id)
    if not budgets:
        click.echo("No budgets found.")
        return

    click.echo(f"\nFound {len(budgets)} budget(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<5} {'Name':<25} {'Client':<22} {'Ver':>3} {'Issued':<11} "
        f"{'Status':<9} {'Total':>20}"
    )
    click.echo("-" * 110)
    for doc in budgets:
        summary = service.get_summary(doc.id)
        click.echo(
            f"{doc.id:<5} {doc.name[:25]:<25} {doc.client[:22]:<22} {doc.version:>3} "
            f"{str(doc.issue_date):<11} {doc.status.value:<9} "
            f"{format_guarani(summary.total):>20}"
        )


@budget_group.command("show")
@click.argument("document_id", type=int)
@click.pass_context
def show_budget(ctx, document_id: int):
    """Show a budget with its lines grouped by category and its totals."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        document = service.require_budget(document_id)
        groups = service.grouped_items(document_id)
        summary = service.get_summary(document_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    project = ProjectService(db).get_project(document.project_id)

    click.echo(f"\nBudget {document.id}: {document.name} (v{document.version})")
    click.echo(f"  Project: {project.name if project else document.project_id}")
    click.echo(f"  Client: {document.client}")
    click.echo(f"  Issue date: {document.issue_date.strftime('%d/%m/%Y')}")
    click.echo(f"  Status: {document.status.value}")
    if document.description:
        click.echo(f"  Description: {document.description}")

    if not groups:
        click.echo("\nNo items yet. Use 'item add' to add one.")
    for group in groups:
        _print_group(group)

    click.echo()
    _print_summary(summary, document.discount_doc, document.iva_pct)


@budget_group.command("terms")
@click.argument("document_id", type=int)
@click.option("--discount", help="Document discount amount in guaraníes")
@click.option("--iva", help="IVA rate (e.g. 10% or 0.1)")
@click.pass_context
def update_terms(ctx, document_id: int, discount: str | None, iva: str | None):
    """Change a budget's discount and/or IVA rate.

    Examples:
        signquote budget terms 1 --discount 500000
        signquote budget terms 1 --iva 5%
    """
    if discount is None and iva is None:
        click.echo("Error: Provide --discount and/or --iva.", err=True)
        ctx.exit(1)

    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        service.update_terms(
            document_id,
            discount_doc=parse_amount(discount) if discount is not None else None,
            iva_pct=parse_percent(iva) if iva is not None else None,
        )
        summary = service.get_summary(document_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated budget {document_id}")
    click.echo(f"  Total: {format_guarani(summary.total)}")


@budget_group.command("status")
@click.argument("document_id", type=int)
@click.argument(
    "status",
    type=click.Choice([s.value for s in BudgetStatus], case_sensitive=False),
)
@click.pass_context
def set_budget_status(ctx, document_id: int, status: str):
    """Change a budget's status."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        service.set_status(document_id, status.lower())
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Budget {document_id} is now {status.lower()}")


@budget_group.command("delete")
@click.argument("document_id", type=int)
@click.pass_context
def delete_budget(ctx, document_id: int):
    """Delete a budget and all its items."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        document = service.require_budget(document_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not click.confirm(
        f"Are you sure you want to delete budget '{document.name}' (ID: {document_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_budget(document_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted budget '{document.name}'")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
