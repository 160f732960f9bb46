"""
Rainbow Collage
===============

Arrange a set of photos into a rectangular collage whose tiles flow
through the colour wheel. Each image is reduced to its mean colour,
images are sorted by HSV, and the sorted sequence is laid out along
the grid's anti-diagonals so neighbours match in both directions.
"""

__version__ = "1.0.0"

from rainbow_collage.collage import arrange, make_collage
from rainbow_collage.color_utils import ColorKey, average_color, color_key, rgb_to_hsv
from rainbow_collage.config import CollageConfig
from rainbow_collage.errors import (
    CollageError,
    ConfigError,
    GridSizeMismatchError,
    InvalidImageError,
    MergeError,
    MissingColorKeyError,
)
from rainbow_collage.grid import diagonal_path, placement_matrix, rearrange
from rainbow_collage.merge import Cell, GridMerger
from rainbow_collage.sorting import BLANK_KEY, Entry, sort_by_hsv

__all__ = [
    "BLANK_KEY",
    "Cell",
    "CollageConfig",
    "CollageError",
    "ColorKey",
    "ConfigError",
    "Entry",
    "GridMerger",
    "GridSizeMismatchError",
    "InvalidImageError",
    "MergeError",
    "MissingColorKeyError",
    "arrange",
    "average_color",
    "color_key",
    "diagonal_path",
    "make_collage",
    "placement_matrix",
    "rearrange",
    "rgb_to_hsv",
    "sort_by_hsv",
]
