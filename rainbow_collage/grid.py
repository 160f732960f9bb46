"""Diagonal zig-zag placement of a sorted sequence on a grid.

Consecutive items are laid out along anti-diagonals, alternating between
up-right and down-left sweeps, so items close in sorted order stay close on
the grid in both directions. The result is flattened back to row-major order:
the item for cell ``(row, col)`` sits at ``row * width + col``.

Example (width=3, height=3, sorted indices 0..8)::

    0 1 5
    2 4 6
    3 7 8
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from rainbow_collage.errors import GridSizeMismatchError

T = TypeVar("T")


def check_grid(count: int, width: int, height: int) -> None:
    """Raise :class:`GridSizeMismatchError` unless ``count == width * height``."""
    if width <= 0 or height <= 0:
        msg = f"Grid dimensions must be positive, got {width}x{height}"
        raise GridSizeMismatchError(msg)
    if count != width * height:
        msg = (
            f"Grid {width}x{height} needs exactly {width * height} "
            f"images, got {count}"
        )
        raise GridSizeMismatchError(msg)


def diagonal_path(width: int, height: int) -> list[tuple[int, int]]:
    """Cells ``(row, col)`` in the order the zig-zag visits them."""
    check_grid(width * height, width, height)

    path: list[tuple[int, int]] = []
    row, col = 0, 0
    up = True  # up-right (row-1, col+1); otherwise down-left (row+1, col-1)

    for _ in range(width * height):
        path.append((row, col))

        new_row, new_col = (row - 1, col + 1) if up else (row + 1, col - 1)
        if 0 <= new_row < height and 0 <= new_col < width:
            row, col = new_row, new_col
            continue

        # Blocked: slide one cell along the edge and turn around
        if up:
            if col == width - 1:
                row += 1
            else:
                col += 1
        elif row == height - 1:
            col += 1
        else:
            row += 1
        up = not up

    return path


def placement_matrix(width: int, height: int) -> np.ndarray:
    """(height, width) int array; cell [r, c] is the sorted index placed there."""
    matrix = np.full((height, width), -1, dtype=np.intp)
    for k, (r, c) in enumerate(diagonal_path(width, height)):
        matrix[r, c] = k
    return matrix


def rearrange(items: Sequence[T], width: int, height: int) -> list[T]:
    """Permute sorted *items* into row-major order of the zig-zag layout.

    Raises:
        GridSizeMismatchError: If ``len(items) != width * height``.
    """
    check_grid(len(items), width, height)
    return [items[k] for k in placement_matrix(width, height).ravel()]
