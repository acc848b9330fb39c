"""Shared state and helpers for CLI commands."""

import logging
import sys
from dataclasses import dataclass
from functools import wraps
from pathlib import Path
from typing import Callable, Optional

import click

from sensematrix.devices import MatrixDriver
from sensematrix.exceptions import SenseMatrixError, format_error_for_display, handle_errors
from sensematrix.models import MatrixConfig

logger = logging.getLogger(__name__)


@dataclass
class CLIContext:
    """Options collected by the top-level group, passed to subcommands."""

    config_path: Path
    device: Optional[Path] = None
    log_path: Optional[Path] = None

    def load_config(self) -> MatrixConfig:
        """Load the config file, applying the --device override."""
        config = MatrixConfig.load_or_default(self.config_path)
        if self.device is not None:
            config = config.model_copy(update={"device_path": self.device})
        return config

    def open_driver(self) -> MatrixDriver:
        """Create a driver from config (explicit device or discovery)."""
        return MatrixDriver.from_config(self.load_config())


pass_cli_context = click.make_pass_decorator(CLIContext)


def cli_errors(operation_name: str) -> Callable:
    """
    Run a command with logging and friendly error output.

    SenseMatrixError is logged, shown as "ERROR: ..." with its recovery hint
    on stderr, and turned into exit code 1. Other exceptions propagate.
    """
    def decorator(func: Callable) -> Callable:
        logged = handle_errors(operation_name=operation_name)(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return logged(*args, **kwargs)
            except SenseMatrixError as e:
                user_message, recovery_hint = format_error_for_display(e)
                click.echo(f"ERROR: {user_message}", err=True)
                if recovery_hint:
                    click.echo(f"\n{recovery_hint}", err=True)

                ctx = click.get_current_context(silent=True)
                if ctx is not None and isinstance(ctx.obj, CLIContext) and ctx.obj.log_path:
                    click.echo(f"\nFor details, check the log file: {ctx.obj.log_path}", err=True)
                sys.exit(1)

        return wrapper
    return decorator
