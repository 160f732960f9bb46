"""Default merge collaborator: paste one image per cell onto a canvas."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from PIL import Image

from rainbow_collage.color_utils import to_rgb
from rainbow_collage.errors import MergeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """One grid position and the image to draw there (``None`` = blank)."""

    image: Image.Image | None
    row: int
    col: int


class Merger(Protocol):
    """Anything that composes cells into one bitmap, or raises."""

    def __call__(
        self, cells: Sequence[Cell], width: int, height: int,
    ) -> Image.Image: ...


class GridMerger:
    """Resize every image to a common tile and paste it at its cell.

    Args:
        tile_size: (w, h) of a tile. Defaults to the size of the first
            non-blank image.
        background: RGB colour of blank cells.
    """

    def __init__(
        self,
        tile_size: tuple[int, int] | None = None,
        background: tuple[int, int, int] = (0, 0, 0),
    ) -> None:
        self.tile_size = tile_size
        self.background = background

    def _resolve_tile_size(self, cells: Sequence[Cell]) -> tuple[int, int]:
        if self.tile_size is not None:
            tw, th = self.tile_size
        else:
            first = next((c.image for c in cells if c.image is not None), None)
            if first is None:
                msg = "Cannot infer tile size: every cell is blank"
                raise MergeError(msg)
            tw, th = first.size
        if tw <= 0 or th <= 0:
            msg = f"Tile size must be positive, got {tw}x{th}"
            raise MergeError(msg)
        return tw, th

    def __call__(
        self, cells: Sequence[Cell], width: int, height: int,
    ) -> Image.Image:
        tw, th = self._resolve_tile_size(cells)
        logger.info(
            "Merging %d cells into %dx%d grid of %dx%d tiles ...",
            len(cells), width, height, tw, th,
        )
        t0 = time.perf_counter()

        canvas = Image.new("RGB", (width * tw, height * th), self.background)
        for cell in cells:
            if not (0 <= cell.row < height and 0 <= cell.col < width):
                msg = f"Cell ({cell.row}, {cell.col}) outside {width}x{height} grid"
                raise MergeError(msg)
            if cell.image is None:
                continue
            try:
                tile = to_rgb(cell.image)
                if tile.size != (tw, th):
                    tile = tile.resize((tw, th), Image.LANCZOS)
                canvas.paste(tile, (cell.col * tw, cell.row * th))
            except (OSError, ValueError) as exc:
                msg = f"Failed to draw cell ({cell.row}, {cell.col}): {exc}"
                raise MergeError(msg) from exc

        logger.info(
            "Collage ready %dx%d px  (%.2f s)",
            canvas.width, canvas.height, time.perf_counter() - t0,
        )
        return canvas
