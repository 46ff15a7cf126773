"""Error reporting for CLI commands."""

import logging
import sys

import click

from midipump.exceptions import format_error_for_display

logger = logging.getLogger(__name__)


def exit_with_error(error: Exception) -> None:
    """Print a friendly message and recovery hint, then exit with status 1."""
    logger.error(f"Command failed: {getattr(error, 'technical_message', error)}")

    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)


def parse_port(value):
    """Interpret a PORT argument: digits select by index, anything else by name."""
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return value
