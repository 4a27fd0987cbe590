"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from kiianigen import __version__

from .commands import config, generate, list_generators, preview

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".kiianigen" / "logs"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Console output goes to stderr so generated JSON on stdout stays clean.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        The log file path
    """
    # Determine log level based on flags
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level applies to the file
    file_level = getattr(logging, log_level.upper()) if log_file else level

    # Determine log file path
    if debug and not log_file:
        log_path = Path.cwd() / "kiianigen-debug.log"
    elif log_file:
        log_path = log_file
    else:
        DEFAULT_LOG_DIR.mkdir(parents=True, exist_ok=True)
        log_path = DEFAULT_LOG_DIR / "kiianigen.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Create rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, file_level))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="kiianigen")
@click.option(
    '--config-file',
    '-c',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='App config file (default: ~/.kiianigen/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./kiianigen-debug.log)'
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
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Kiianigen - LED animation generator for the Input Club KType keyboard.

    Reads the configurator export (KType-Standard.json and kll.json),
    generates animations and writes a new device config with the animations
    bound to trigger keys on layer 1.

    \b
    Examples:
      # Generate one animation
      kiianigen generate kitt2000

      # Generate with parameters (JSON values)
      kiianigen generate kitt2000 '[255,102,0]' '[0,0,0]' 7

      # Generate every animation
      kiianigen generate all

      # Generate the animations listed in kiianiconf.json
      kiianigen generate conf

      # List generators
      kiianigen list
    """
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file, log_level)


# Register commands
cli.add_command(generate)
cli.add_command(list_generators)
cli.add_command(preview)
cli.add_command(config)

if __name__ == "__main__":
    cli()
