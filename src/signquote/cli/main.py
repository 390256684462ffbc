"""Main CLI entry point."""

import logging

import click
from signquote.database.factories import create_sqlite_database

# Import and register all commands at module level
from signquote.cli.commands import (
    project,
    budget,
    item,
    price,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SIGNQUOTE_DB_PATH environment variable)",
    envvar="SIGNQUOTE_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="SIGNQUOTE_LOG_LEVEL",
    help="Logging level (overrides SIGNQUOTE_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Signquote - Budgets for sign fabrication.

    Manage projects and their budgets (quotes): price each line from its
    dimensions, quantity, unit price and discount, and get document totals
    with discount and IVA.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when a command needs it
    # (not when showing help or pricing a single line)
    if ctx.invoked_subcommand not in (None, "price"):
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
project.register_commands(cli)
budget.register_commands(cli)
item.register_commands(cli)
price.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
