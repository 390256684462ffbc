"""CLI error handling helpers."""

import logging
from typing import NoReturn

import click

from signquote.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> NoReturn:
    """Print ``Error: <message>`` to stderr and exit with status 1."""
    logger.debug("%s failed: %s: %s", ctx.command_path, type(error).__name__, error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
