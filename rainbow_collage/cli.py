"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import typer
from PIL import ImageColor
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from rainbow_collage.collage import arrange, make_collage
from rainbow_collage.config import CollageConfig
from rainbow_collage.color_utils import check_hue_scale
from rainbow_collage.errors import CollageError, ConfigError
from rainbow_collage.image_io import (
    check_fits,
    collect_images,
    load_image,
    pad_to_grid,
    save_collage,
)

app = typer.Typer(
    name="rainbow-collage",
    help="Arrange photos into a colour-sorted rainbow collage.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


def _load_folder(
    input_dir: Path, width: int, height: int, extensions: frozenset[str],
) -> tuple[list[Path | None], list]:
    paths = collect_images(input_dir, extensions)
    if not paths:
        console.print(f"\n[yellow]No images found in {input_dir}/[/yellow]")
        console.print("Place .jpg / .png / ... files there and re-run.\n")
        raise typer.Exit(0)

    check_fits(len(paths), width, height)
    images = pad_to_grid([load_image(p) for p in paths], width, height)
    names: list[Path | None] = [*paths, *[None] * (len(images) - len(paths))]
    return names, images


def _parse_background(value: str) -> tuple[int, int, int]:
    try:
        return ImageColor.getrgb(value)[:3]
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown colour {value!r}") from exc


def _validate_hue_scale(value: float) -> float:
    try:
        check_hue_scale(value)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return value


# Defaults come from CollageConfig - single source of truth
_DEFAULTS = CollageConfig()
_BACKGROUND_HEX = "#%02x%02x%02x" % _DEFAULTS.background


# -- build command -----------------------------------------------------

@app.command()
def build(
    input_dir: Path = typer.Argument(
        _DEFAULTS.input_dir, help="Folder with source images",
    ),
    output: Path = typer.Option(
        _DEFAULTS.output, "--output", "-o", help="Collage file to write",
    ),
    width: int = typer.Option(_DEFAULTS.width, "--width", "-x", help="Grid columns"),
    height: int = typer.Option(_DEFAULTS.height, "--height", "-y", help="Grid rows"),
    tile: int | None = typer.Option(
        None, "--tile-size", "-t", help="Square tile side in px (default: first image)",
    ),
    background: str = typer.Option(
        _BACKGROUND_HEX, "--background", "-b", help="Colour of blank cells",
    ),
    workers: int | None = typer.Option(
        _DEFAULTS.workers, "--workers", "-w", help="Colour computation threads",
    ),
    hue_scale: float = typer.Option(
        _DEFAULTS.hue_scale, "--hue-scale", callback=_validate_hue_scale,
        help="Hue multiplier (360 = degrees)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Build a collage from every image in INPUT_DIR."""
    _setup_logging(verbose)

    cfg = CollageConfig(
        width=width,
        height=height,
        tile_size=(tile, tile) if tile else None,
        background=_parse_background(background),
        workers=workers,
        hue_scale=hue_scale,
        input_dir=input_dir,
        output=output,
    )

    console.print(Panel.fit(
        f"[bold]RAINBOW COLLAGE[/bold]\n"
        f"Grid: {cfg.width}x{cfg.height}  |  Tile: {cfg.tile_size or 'auto'}\n"
        f"Input: {cfg.input_dir}  |  Output: {cfg.output}",
        border_style="cyan",
    ))

    t_total = time.perf_counter()
    try:
        names, images = _load_folder(
            cfg.input_dir, cfg.width, cfg.height, cfg.SUPPORTED_EXTENSIONS,
        )
        collage = make_collage(images, cfg.width, cfg.height, config=cfg)
    except CollageError as exc:
        console.print(f"[red]✗ {exc}[/red]")
        raise typer.Exit(1) from exc

    save_collage(collage, cfg.output)
    elapsed = time.perf_counter() - t_total
    used = sum(n is not None for n in names)

    console.print(
        f"  [green]✓[/green] {cfg.output}  "
        f"[dim]{collage.width}x{collage.height} px  images={used}/{cfg.cells}"
        f"  time={elapsed:.1f}s[/dim]"
    )


# -- inspect command ---------------------------------------------------

@app.command()
def inspect(
    input_dir: Path = typer.Argument(_DEFAULTS.input_dir),
    width: int = typer.Option(_DEFAULTS.width, "--width", "-x"),
    height: int = typer.Option(_DEFAULTS.height, "--height", "-y"),
    hue_scale: float = typer.Option(
        _DEFAULTS.hue_scale, "--hue-scale", callback=_validate_hue_scale,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Print the arranged grid with each cell's colour key."""
    _setup_logging(verbose)

    try:
        names, images = _load_folder(
            input_dir, width, height, _DEFAULTS.SUPPORTED_EXTENSIONS,
        )
        # Carry file names through the arrangement by image identity
        by_id = {id(img): n for img, n in zip(images, names, strict=True)
                 if img is not None}
        entries = arrange(images, width, height, hue_scale=hue_scale)
    except CollageError as exc:
        console.print(f"[red]✗ {exc}[/red]")
        raise typer.Exit(1) from exc

    table = Table(title=f"{width}x{height} grid")
    for col in ("Cell", "File", "Hue", "Sat", "Val"):
        table.add_column(col, justify="left" if col == "File" else "right")

    for i, e in enumerate(entries):
        cell = f"{i // width},{i % width}"
        if e.is_blank:
            table.add_row(cell, "[dim]blank[/dim]", "-", "-", "-")
            continue
        table.add_row(
            cell,
            by_id[id(e.image)].name,
            f"{e.color.hue:.1f}",
            f"{e.color.saturation:.3f}",
            f"{e.color.value:.3f}",
        )
    console.print(table)


if __name__ == "__main__":
    app()
