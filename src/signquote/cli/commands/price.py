"""Stateless line pricing command."""

import click
from signquote.cli.error_handling import handle_domain_error
from signquote.domain.pricing import price_line
from signquote.utils.amount_parser import parse_amount, parse_number, parse_percent
from signquote.utils.currency import format_area, format_guarani


@click.command("price")
@click.option("--height", required=True, help="Height in cm")
@click.option("--width", required=True, help="Width in cm")
@click.option("--qty", default="1", show_default=True, help="Quantity")
@click.option("--price", "unit_price", default="0", help="Unit price in guaraníes per m²")
@click.option("--discount", default="0", help="Discount (e.g. 5% or 0.05)")
@click.pass_context
def price(ctx, height: str, width: str, qty: str, unit_price: str, discount: str):
    """Price a single line without storing it.

    Examples:
        signquote price --height 55 --width 55 --price 1000000
        signquote price --height 50 --width 400 --qty 10 --price 800000 --discount 5%
    """
    try:
        pricing = price_line(
            height_cm=parse_number(height),
            width_cm=parse_number(width),
            quantity=parse_number(qty),
            unit_price=parse_amount(unit_price),
            discount_pct=parse_percent(discount),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Area: {format_area(pricing.area_m2)} m²")
    click.echo(f"Billed area: {format_area(pricing.area_m2_rounded)} m²")
    click.echo(f"Total: {format_guarani(pricing.line_total)}")


def register_commands(cli):
    """Register price command with main CLI."""
    cli.add_command(price)
