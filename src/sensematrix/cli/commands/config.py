"""
Config command group.

Commands:
    - config show [--field FIELD]    # Display configuration
    - config set --option VALUE ...  # Update configuration
    - config reset                   # Reset to defaults
"""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from sensematrix.cli.context import CLIContext, cli_errors, pass_cli_context
from sensematrix.exceptions import wrap_pydantic_error
from sensematrix.models import MatrixConfig


@click.group(name="config")
def config():
    """Configure the LED matrix device and defaults."""
    pass


@config.command(name="show")
@click.option(
    "--field",
    type=click.Choice(sorted(MatrixConfig.model_fields)),
    default=None,
    help="Show a single field",
)
@pass_cli_context
@cli_errors("show config")
def show_config(obj: CLIContext, field: Optional[str]):
    """Display configuration values."""
    current = MatrixConfig.load_or_default(obj.config_path)
    values = current.model_dump(mode="json")

    if field:
        click.echo(f"{field}: {values[field]}")
        return

    click.echo(f"Configuration ({obj.config_path}):\n")
    for name, value in values.items():
        click.echo(f"  {name}: {value}")


@config.command(name="set")
@click.option("--device-path", type=click.Path(dir_okay=False, path_type=Path), help="Framebuffer device, e.g. /dev/fb1")
@click.option("--graphics-dir", type=click.Path(file_okay=False, path_type=Path), help="Directory scanned during discovery")
@click.option("--device-dir", type=click.Path(file_okay=False, path_type=Path), help="Directory holding device nodes")
@click.option("--product-name", type=str, help="Framebuffer name marking the LED matrix")
@click.option("--rotation", "-r", type=int, help="Start-up rotation (0, 90, 180 or 270)")
@pass_cli_context
@cli_errors("update config")
def set_config(obj: CLIContext, **updates):
    """Update configuration values and save."""
    updates = {key: value for key, value in updates.items() if value is not None}
    if not updates:
        raise click.UsageError("Nothing to set. Pass at least one option, see --help.")

    current = MatrixConfig.load_or_default(obj.config_path)
    try:
        updated = MatrixConfig.model_validate({**current.model_dump(), **updates})
    except ValidationError as e:
        raise wrap_pydantic_error(e, str(obj.config_path)) from e

    updated.save(obj.config_path)
    for key, value in updates.items():
        click.echo(f"[OK] {key} = {value}")


@config.command(name="reset")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@pass_cli_context
@cli_errors("reset config")
def reset_config(obj: CLIContext, yes: bool):
    """Reset configuration to defaults."""
    if not yes:
        click.confirm(f"Reset {obj.config_path} to defaults?", abort=True)
    MatrixConfig().save(obj.config_path)
    click.echo("[OK] Configuration reset to defaults")
