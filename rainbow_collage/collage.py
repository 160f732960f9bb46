"""Collage assembly: colour sort, diagonal placement, then merge."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from PIL import Image

from rainbow_collage.config import CollageConfig
from rainbow_collage.grid import check_grid, rearrange
from rainbow_collage.merge import Cell, GridMerger, Merger
from rainbow_collage.sorting import Entry, make_entries, sort_by_hsv

logger = logging.getLogger(__name__)


def arrange(
    images: Sequence[Image.Image | None],
    width: int,
    height: int,
    *,
    workers: int | None = None,
    hue_scale: float = 360.0,
) -> list[Entry]:
    """Sort *images* by colour and lay them out along the diagonals.

    Returns:
        ``width * height`` entries in row-major grid order.

    Raises:
        GridSizeMismatchError: Before any colour work if the count is wrong.
        InvalidImageError: If an image has zero area.
    """
    check_grid(len(images), width, height)

    blanks = sum(img is None for img in images)
    logger.info(
        "Arranging %d images on a %dx%d grid (%d blank)",
        len(images) - blanks, width, height, blanks,
    )

    entries = make_entries(images)
    sort_by_hsv(entries, workers=workers, hue_scale=hue_scale)
    return rearrange(entries, width, height)


def to_cells(entries: Sequence[Entry], width: int) -> list[Cell]:
    """One :class:`Cell` per row-major entry."""
    return [
        Cell(image=e.image, row=i // width, col=i % width)
        for i, e in enumerate(entries)
    ]


def make_collage(
    images: Sequence[Image.Image | None],
    width: int,
    height: int,
    merge: Merger | None = None,
    *,
    workers: int | None = None,
    hue_scale: float | None = None,
    config: CollageConfig | None = None,
) -> Image.Image:
    """Build a rainbow collage from *images*.

    Args:
        images: Exactly ``width * height`` handles; ``None`` marks a blank cell.
        width: Grid columns.
        height: Grid rows.
        merge: Compositing callable ``(cells, width, height) -> Image``.
            Defaults to a :class:`GridMerger` built from *config*.
        workers: Thread pool size for colour computation.
        hue_scale: Hue multiplier (defaults to ``config.hue_scale``).
        config: Source of defaults.

    Errors raised by *merge* propagate unchanged.
    """
    cfg = config or CollageConfig()
    if merge is None:
        merge = GridMerger(tile_size=cfg.tile_size, background=cfg.background)

    entries = arrange(
        images, width, height,
        workers=workers if workers is not None else cfg.workers,
        hue_scale=hue_scale if hue_scale is not None else cfg.hue_scale,
    )
    return merge(to_cells(entries, width), width, height)
