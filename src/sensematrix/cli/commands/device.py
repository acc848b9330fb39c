"""Device discovery commands."""

import click

from sensematrix.cli.context import CLIContext, cli_errors, pass_cli_context
from sensematrix.devices import find_framebuffer, list_framebuffers


@click.group(name="device")
def device_group():
    """Find the LED matrix framebuffer."""
    pass


@device_group.command(name="list")
@pass_cli_context
@cli_errors("list framebuffers")
def list_devices(obj: CLIContext):
    """List framebuffers and their product names."""
    config = obj.load_config()
    entries = list_framebuffers(config.graphics_dir)

    if not entries:
        click.echo(f"No framebuffers found under {config.graphics_dir}.")
        return

    click.echo(f"Framebuffers under {config.graphics_dir}:\n")
    for entry_name, name in entries:
        marker = "  <- LED matrix" if name == config.product_name else ""
        click.echo(f"  {config.device_dir / entry_name}: {name or '(unreadable)'}{marker}")


@device_group.command(name="detect")
@pass_cli_context
@cli_errors("detect device")
def detect(obj: CLIContext):
    """Print the device path of the LED matrix."""
    config = obj.load_config()
    if config.device_path is not None:
        click.echo(str(config.device_path))
        return

    device = find_framebuffer(config.graphics_dir, config.device_dir, config.product_name)
    if device is None:
        click.echo(f"No '{config.product_name}' framebuffer found.", err=True)
        raise SystemExit(1)
    click.echo(str(device))
