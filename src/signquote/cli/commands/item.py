"""Budget line commands."""

import click
from signquote.cli.error_handling import handle_domain_error
from signquote.domain.budget import BudgetService
from signquote.domain.categories import CATEGORIES, category_label
from signquote.domain.entities import BudgetLineItem
from signquote.utils.amount_parser import parse_amount, parse_number, parse_percent
from signquote.utils.currency import format_area, format_guarani

CATEGORY_HELP = "Category tag (" + ", ".join(tag for tag, _ in CATEGORIES) + ")"


def _echo_line(line: BudgetLineItem) -> None:
    """Print the derived values of a line."""
    click.echo(f"  Line: {line.line_number} ({category_label(line.category)})")
    if line.description:
        click.echo(f"  Description: {line.description}")
    click.echo(f"  Area: {format_area(line.area_m2)} m² (billed {format_area(line.area_m2_rounded)} m²)")
    click.echo(f"  Total: {format_guarani(line.line_total)}")


def _parse_line_options(
    height: str | None,
    width: str | None,
    qty: str | None,
    price: str | None,
    discount: str | None,
) -> dict:
    """Parse numeric options that were given; omitted ones are left out."""
    values = {}
    if height is not None:
        values["height_cm"] = parse_number(height)
    if width is not None:
        values["width_cm"] = parse_number(width)
    if qty is not None:
        values["quantity"] = parse_number(qty)
    if price is not None:
        values["unit_price"] = parse_amount(price)
    if discount is not None:
        values["discount_pct"] = parse_percent(discount)
    return values


@click.group()
def item_group():
    """Manage budget items."""
    pass


@item_group.command("add")
@click.argument("document_id", type=int)
@click.option("--description", default="", help="Item description")
@click.option("--category", help=CATEGORY_HELP)
@click.option("--color", default="", help="Color")
@click.option("--faces", type=int, default=1, show_default=True, help="Number of faces")
@click.option("--height", help="Height in cm")
@click.option("--width", help="Width in cm")
@click.option("--qty", help="Quantity (default 1)")
@click.option("--price", help="Unit price in guaraníes per m²")
@click.option("--discount", help="Discount (e.g. 5% or 0.05)")
@click.pass_context
def add_item(
    ctx,
    document_id: int,
    description: str,
    category: str | None,
    color: str,
    faces: int,
    height: str | None,
    width: str | None,
    qty: str | None,
    price: str | None,
    discount: str | None,
):
    """Add an item to a budget.

    Examples:
        signquote item add 1 --description "Cartel Corporativo" --category cartel --height 200 --width 300 --price 5000000
        signquote item add 1 --description "Letras" --category corporeo --height 50 --width 400 --qty 10 --price 800000 --discount 5%
    """
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        values = _parse_line_options(height, width, qty, price, discount)
        item_id = service.add_item(
            document_id,
            description=description,
            category=category,
            color=color,
            faces=faces,
            **values,
        )
        line = service.get_item(item_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added item {item_id} to budget {document_id}")
    _echo_line(line)


@item_group.command("update")
@click.argument("item_id", type=int)
@click.option("--description", help="Item description")
@click.option("--category", help=CATEGORY_HELP)
@click.option("--color", help="Color")
@click.option("--faces", type=int, help="Number of faces")
@click.option("--line-number", type=int, help="Display position")
@click.option("--height", help="Height in cm")
@click.option("--width", help="Width in cm")
@click.option("--qty", help="Quantity")
@click.option("--price", help="Unit price in guaraníes per m²")
@click.option("--discount", help="Discount (e.g. 5% or 0.05)")
@click.pass_context
def update_item(
    ctx,
    item_id: int,
    description: str | None,
    category: str | None,
    color: str | None,
    faces: int | None,
    line_number: int | None,
    height: str | None,
    width: str | None,
    qty: str | None,
    price: str | None,
    discount: str | None,
):
    """Update an item; area and total are recomputed.

    Updates only the fields that are provided.

    Examples:
        signquote item update 3 --qty 12
        signquote item update 3 --height 55 --width 55
    """
    db = ctx.obj["db"]
    service = BudgetService(db)

    changes = {}
    for field, value in (
        ("description", description),
        ("category", category),
        ("color", color),
        ("faces", faces),
        ("line_number", line_number),
    ):
        if value is not None:
            changes[field] = value

    try:
        changes.update(_parse_line_options(height, width, qty, price, discount))
        if not changes:
            click.echo("Nothing to update.")
            return
        line = service.update_item(item_id, **changes)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated item {item_id}")
    _echo_line(line)


@item_group.command("delete")
@click.argument("item_id", type=int)
@click.option("--renumber", is_flag=True, help="Renumber the remaining items afterwards")
@click.pass_context
def delete_item(ctx, item_id: int, renumber: bool):
    """Delete an item from its budget."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        line = service.get_item(item_id)
        service.delete_item(item_id)
        if renumber:
            service.renumber_items(line.document_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted item {item_id}")


@item_group.command("renumber")
@click.argument("document_id", type=int)
@click.pass_context
def renumber_items(ctx, document_id: int):
    """Renumber a budget's items 1..n in their current order."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        changed = service.renumber_items(document_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Renumbered {changed} item(s)")


def register_commands(cli):
    """Register item commands with main CLI."""
    cli.add_command(item_group, name="item")
