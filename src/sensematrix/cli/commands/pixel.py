"""Single-pixel commands."""

import click

from sensematrix.cli.context import CLIContext, cli_errors, pass_cli_context

CHANNEL = click.IntRange(0, 255)


@click.group(name="pixel")
def pixel_group():
    """Read or write a single pixel."""
    pass


@pixel_group.command(name="get")
@click.argument("x", type=int)
@click.argument("y", type=int)
@pass_cli_context
@cli_errors("get pixel")
def get_pixel(obj: CLIContext, x: int, y: int):
    """Print the color of pixel X Y as 'R G B'."""
    color = obj.open_driver().get_pixel(x, y)
    click.echo(f"{color.r} {color.g} {color.b}")


@pixel_group.command(name="set")
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.argument("r", type=CHANNEL)
@click.argument("g", type=CHANNEL)
@click.argument("b", type=CHANNEL)
@pass_cli_context
@cli_errors("set pixel")
def set_pixel(obj: CLIContext, x: int, y: int, r: int, g: int, b: int):
    """Set pixel X Y to color R G B (each 0-255)."""
    obj.open_driver().set_pixel(x, y, (r, g, b))
