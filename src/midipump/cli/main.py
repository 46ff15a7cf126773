"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from midipump import __version__
from midipump.exceptions import ConfigurationError
from midipump.models import DEFAULT_CONFIG_PATH, AppConfig

from .commands import config_group, list_ports, monitor, send_group
from .errors import exit_with_error

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG level to ./midipump-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level used with a custom log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "midipump-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_dir = Path.home() / ".midipump" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "midipump.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="midipump")
@click.option(
    '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Config file (default: {DEFAULT_CONFIG_PATH})'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./midipump-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    midipump - decode, monitor and send MIDI messages.

    \b
    Examples:
      # List MIDI ports
      midipump list

      # Print everything arriving on input port 0
      midipump monitor 0

      # Send middle C on channel 1 to a named port
      midipump send note "My Synth" --channel 0 --number 60 --velocity 100

      # Set NRPN 1000 to 8192
      midipump send nrpn 0 --number 1000 --value 8192
    """
    setup_logging(verbose, debug, log_file, log_level)

    path = config_path or DEFAULT_CONFIG_PATH
    try:
        config = AppConfig.load_or_default(path)
    except ConfigurationError as e:
        # 'config reset' must still work with a broken file
        if ctx.invoked_subcommand != "config":
            exit_with_error(e)
        logger.warning(f"Ignoring invalid config {path}: {e.technical_message}")
        config = AppConfig()

    ctx.obj = {"config": config, "config_path": path}


cli.add_command(list_ports)
cli.add_command(monitor)
cli.add_command(send_group)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
