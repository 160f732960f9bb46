"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rainbow_collage.color_utils import check_hue_scale


@dataclass(frozen=True)
class CollageConfig:
    """All tuneable parameters for a collage run.

    Attributes:
        width:       Number of grid columns.
        height:      Number of grid rows.
        tile_size:   (w, h) of each cell in pixels (None = first image's size).
        background:  RGB fill for blank cells.
        workers:     Thread pool size for colour computation (None = default).
        hue_scale:   Multiplier applied to the unit hue (360 = degrees).
        input_dir:   Folder to scan for source images.
        output:      Path of the composed collage.
    """

    # Grid
    width: int = 8
    height: int = 6

    # Tiles
    tile_size: tuple[int, int] | None = None
    background: tuple[int, int, int] = (0, 0, 0)

    # Colour keys
    workers: int | None = None
    hue_scale: float = 360.0  # 60.0 reproduces the legacy scaling

    # Paths
    input_dir: Path = field(default_factory=lambda: Path("images"))
    output: Path = field(default_factory=lambda: Path("output/collage.png"))

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".jpg", ".jpeg", ".png", ".bmp", ".tiff", ".tif", ".webp", ".jfif", ".gif"}
    )

    def __post_init__(self) -> None:
        check_hue_scale(self.hue_scale)

    @property
    def cells(self) -> int:
        return self.width * self.height
