"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from sensematrix import __version__
from sensematrix.models.config import default_config_path

from .commands import clear, config, device_group, fill, flip, pixel_group, rotate, show
from .context import CLIContext

logger = logging.getLogger(__name__)

HANDLER_NAME = "sensematrix-file"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Pick the log file: --log-file, ./sensematrix-debug.log with --debug, else ~/.sensematrix/logs."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "sensematrix-debug.log"
    return Path.home() / ".sensematrix" / "logs" / "sensematrix.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file in use
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins when logging to a custom file
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.set_name(HANDLER_NAME)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="sensematrix")
@click.option(
    '--device',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Framebuffer device to use (skips discovery), e.g. /dev/fb1'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.sensematrix/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./sensematrix-debug.log)'
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
    device: Optional[Path],
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Sense HAT LED matrix control - drive the 8x8 RGB matrix from the shell.

    The matrix framebuffer is found automatically by scanning
    /sys/class/graphics, or given with --device.

    \b
    Examples:
      # Light the top-left pixel red
      sensematrix pixel set 0 0 255 0 0

      # Show the current image as hex colors
      sensematrix show

      # Rotate the display, keeping the image upright for the viewer
      sensematrix rotate 90

      # Mirror and clear
      sensematrix flip --horizontal
      sensematrix clear

      # Find the device
      sensematrix device detect
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)
    ctx.obj = CLIContext(
        config_path=config_path or default_config_path(),
        device=device,
        log_path=log_path,
    )


cli.add_command(device_group)
cli.add_command(pixel_group)
cli.add_command(show)
cli.add_command(clear)
cli.add_command(fill)
cli.add_command(rotate)
cli.add_command(flip)
cli.add_command(config)

if __name__ == "__main__":
    cli()
