"""Command-line interface for modeltree.

Usage:
    modeltree info drawing.json
    modeltree originate drawing.json [-o out.json]
    modeltree move drawing.json X Y
    modeltree rotate drawing.json ANGLE [--about X Y]
    modeltree scale drawing.json FACTOR [--scale-origin]
    modeltree mirror drawing.json [--x] [--y]
    modeltree convert drawing.json UNITS
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .core.config import ModelTreeConfig
from .core.units import UnitType
from .drawing import Model, transform
from .paths import length

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich output."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False)],
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """modeltree - compose and transform nested 2D drawings."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose)

    if config:
        ctx.obj["config"] = ModelTreeConfig.from_file(config)
    else:
        ctx.obj["config"] = ModelTreeConfig.default()


def _load_drawing(ctx: click.Context, drawing_path: str) -> Model:
    """Load a drawing, converting it to the configured units if any."""
    cfg: ModelTreeConfig = ctx.obj["config"]

    try:
        model = Model.load(drawing_path)
    except ValueError as e:
        console.print(f"[bold red]Invalid drawing {drawing_path}: {escape(str(e))}[/bold red]")
        raise click.Abort()

    if cfg.transform.default_units is not None and model.units is not None:
        transform.scale_units(model, Model(units=cfg.transform.default_units))
        model.units = cfg.transform.default_units

    return model


def _save_drawing(ctx: click.Context, model: Model, drawing_path: str, output: str | None) -> None:
    """Write a drawing to ``output`` or back over its source file."""
    cfg: ModelTreeConfig = ctx.obj["config"]
    target = Path(output) if output else Path(drawing_path)

    model.save(target, indent=cfg.output.indent, precision=cfg.output.precision)
    console.print(f"[green]Saved {target}[/green]")


output_option = click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Output file (default: overwrite input)",
)


@main.command()
@click.argument("drawing_path", type=click.Path(exists=True))
@click.pass_context
def info(ctx: click.Context, drawing_path: str) -> None:
    """Show the structure of a drawing.

    DRAWING_PATH: Path to a drawing JSON file
    """
    model = _load_drawing(ctx, drawing_path)

    console.print(f"\n[bold]Drawing Info: {Path(drawing_path).name}[/bold]\n")

    table = Table(show_header=True)
    table.add_column("Model")
    table.add_column("Type")
    table.add_column("Units")
    table.add_column("Origin", justify="right")
    table.add_column("Paths", justify="right")
    table.add_column("Length", justify="right")

    total_paths = 0
    for route, node in model.walk():
        node_paths = node.paths or {}
        total_paths += len(node_paths)
        origin = f"({node.origin[0]:g}, {node.origin[1]:g})" if node.origin is not None else "-"
        table.add_row(
            "/" + "/".join(route),
            node.type or "-",
            node.units.value if node.units else "-",
            origin,
            str(len(node_paths)),
            f"{sum(length(p) for p in node_paths.values()):.3f}",
        )

    console.print(table)
    console.print(f"\nTotal paths: {total_paths}")


@main.command()
@click.argument("drawing_path", type=click.Path(exists=True))
@output_option
@click.pass_context
def originate(ctx: click.Context, drawing_path: str, output: str | None) -> None:
    """Fold all nested origins into absolute path coordinates."""
    model = _load_drawing(ctx, drawing_path)
    transform.originate(model)
    _save_drawing(ctx, model, drawing_path, output)


@main.command()
@click.argument("drawing_path", type=click.Path(exists=True))
@click.argument("x", type=float)
@click.argument("y", type=float)
@output_option
@click.pass_context
def move(ctx: click.Context, drawing_path: str, x: float, y: float, output: str | None) -> None:
    """Place the drawing's root model at (X, Y)."""
    model = _load_drawing(ctx, drawing_path)
    transform.move(model, (x, y))
    _save_drawing(ctx, model, drawing_path, output)


@main.command()
@click.argument("drawing_path", type=click.Path(exists=True))
@click.argument("angle", type=float)
@click.option(
    "--about",
    type=(float, float),
    default=(0.0, 0.0),
    help="Center of rotation (default: 0 0)",
)
@output_option
@click.pass_context
def rotate(
    ctx: click.Context,
    drawing_path: str,
    angle: float,
    about: tuple[float, float],
    output: str | None,
) -> None:
    """Rotate the drawing's contents by ANGLE degrees (counter-clockwise)."""
    model = _load_drawing(ctx, drawing_path)
    transform.rotate(model, angle, about)
    _save_drawing(ctx, model, drawing_path, output)


@main.command()
@click.argument("drawing_path", type=click.Path(exists=True))
@click.argument("factor", type=float)
@click.option(
    "--scale-origin",
    is_flag=True,
    help="Also scale the root model's origin",
)
@output_option
@click.pass_context
def scale(
    ctx: click.Context,
    drawing_path: str,
    factor: float,
    scale_origin: bool,
    output: str | None,
) -> None:
    """Scale the drawing by FACTOR."""
    cfg: ModelTreeConfig = ctx.obj["config"]
    scale_origin = scale_origin or cfg.transform.scale_origin

    model = _load_drawing(ctx, drawing_path)
    transform.scale(model, factor, scale_origin)
    _save_drawing(ctx, model, drawing_path, output)


@main.command()
@click.argument("drawing_path", type=click.Path(exists=True))
@click.option("--x", "mirror_x", is_flag=True, help="Negate x coordinates")
@click.option("--y", "mirror_y", is_flag=True, help="Negate y coordinates")
@output_option
@click.pass_context
def mirror(
    ctx: click.Context,
    drawing_path: str,
    mirror_x: bool,
    mirror_y: bool,
    output: str | None,
) -> None:
    """Write a mirrored copy of the drawing."""
    if not (mirror_x or mirror_y):
        logger.warning("Neither --x nor --y given, writing an unmirrored copy")

    model = _load_drawing(ctx, drawing_path)
    mirrored = transform.mirror(model, mirror_x, mirror_y)
    _save_drawing(ctx, mirrored, drawing_path, output)


@main.command()
@click.argument("drawing_path", type=click.Path(exists=True))
@click.argument("units", type=click.Choice([u.value for u in UnitType]))
@output_option
@click.pass_context
def convert(ctx: click.Context, drawing_path: str, units: str, output: str | None) -> None:
    """Convert the drawing to UNITS.

    The drawing must declare its own units for any scaling to happen.
    """
    model = _load_drawing(ctx, drawing_path)

    if model.units is None:
        console.print("[yellow]Drawing has no units, nothing to convert[/yellow]")
    else:
        destination = Model(units=UnitType(units))
        transform.scale_units(model, destination)
        model.units = destination.units

    _save_drawing(ctx, model, drawing_path, output)


if __name__ == "__main__":
    main()
