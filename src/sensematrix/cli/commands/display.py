"""Whole-matrix commands: show, clear, fill, rotate, flip."""

import json
import logging

import click

from sensematrix.cli.context import CLIContext, cli_errors, pass_cli_context
from sensematrix.models import Frame, MatrixConfig

logger = logging.getLogger(__name__)

CHANNEL = click.IntRange(0, 255)


def format_frame(frame: Frame, fmt: str) -> str:
    """Render a frame as text: 8 lines of hex or 'r,g,b' cells, or JSON."""
    if fmt == "json":
        return json.dumps(frame.to_lists())
    if fmt == "rgb":
        return "\n".join(
            " ".join(f"{c.r:3d},{c.g:3d},{c.b:3d}" for c in row) for row in frame.rows
        )
    return "\n".join(" ".join(c.to_hex() for c in row) for row in frame.rows)


@click.command()
@click.option(
    "--format", "fmt",
    type=click.Choice(["hex", "rgb", "json"], case_sensitive=False),
    default="hex",
    help="Output format (default: hex)",
)
@pass_cli_context
@cli_errors("read frame")
def show(obj: CLIContext, fmt: str):
    """Print the current image, one row per line."""
    click.echo(format_frame(obj.open_driver().get_pixels(), fmt.lower()))


@click.command()
@pass_cli_context
@cli_errors("clear matrix")
def clear(obj: CLIContext):
    """Turn every pixel off."""
    obj.open_driver().clear()


@click.command()
@click.argument("r", type=CHANNEL)
@click.argument("g", type=CHANNEL)
@click.argument("b", type=CHANNEL)
@pass_cli_context
@cli_errors("fill matrix")
def fill(obj: CLIContext, r: int, g: int, b: int):
    """Set every pixel to color R G B."""
    obj.open_driver().fill((r, g, b))


@click.command()
@click.argument("degrees", type=click.Choice(["0", "90", "180", "270"]))
@click.option(
    "--save/--no-save",
    default=True,
    help="Store the rotation in the config file (default: save)",
)
@pass_cli_context
@cli_errors("rotate matrix")
def rotate(obj: CLIContext, degrees: str, save: bool):
    """Rotate the display to DEGREES, keeping the image in view."""
    driver = obj.open_driver()
    driver.set_rotation(int(degrees))

    if save:
        # Reload without the --device override so it is never persisted
        stored = MatrixConfig.load_or_default(obj.config_path)
        stored.model_copy(update={"rotation": int(degrees)}).save(obj.config_path)
        logger.info(f"Saved rotation {degrees} to {obj.config_path}")

    click.echo(f"Rotation: {degrees}")


@click.command()
@click.option("--horizontal", "-h", "axis", flag_value="horizontal", help="Mirror left to right")
@click.option("--vertical", "-v", "axis", flag_value="vertical", help="Mirror top to bottom")
@pass_cli_context
@cli_errors("flip matrix")
def flip(obj: CLIContext, axis: str | None):
    """Mirror the current image horizontally or vertically."""
    if axis is None:
        raise click.UsageError("Choose --horizontal or --vertical")

    driver = obj.open_driver()
    if axis == "horizontal":
        driver.flip_horizontal()
    else:
        driver.flip_vertical()
