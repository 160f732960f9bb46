"""Image loading, grid padding, and saving."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PIL import Image

from rainbow_collage.color_utils import is_high_depth
from rainbow_collage.errors import GridSizeMismatchError, InvalidImageError


def collect_images(folder: Path, extensions: frozenset[str]) -> list[Path]:
    """Supported image files directly inside *folder*, sorted by name."""
    if not folder.exists():
        return []
    return sorted(
        f for f in folder.iterdir()
        if f.is_file() and f.suffix.lower() in extensions
    )


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode *path*.

    16-bit, 32-bit and float images keep their mode; everything else is
    converted to RGB.
    """
    try:
        with Image.open(path) as img:
            if is_high_depth(img):
                img.load()
                return img.copy()
            return img.convert("RGB")
    except OSError as exc:
        msg = f"Cannot read image {path}: {exc}"
        raise InvalidImageError(msg) from exc


def check_fits(count: int, width: int, height: int) -> None:
    """Raise :class:`GridSizeMismatchError` if *count* exceeds the grid."""
    if count > width * height:
        msg = f"{count} images do not fit a {width}x{height} grid"
        raise GridSizeMismatchError(msg)


def pad_to_grid(
    images: Sequence[Image.Image | None],
    width: int,
    height: int,
) -> list[Image.Image | None]:
    """Append blank cells (``None``) until there are ``width * height`` slots.

    Raises:
        GridSizeMismatchError: If there are already more images than cells.
    """
    check_fits(len(images), width, height)
    cells = width * height
    return list(images) + [None] * (cells - len(images))


def save_collage(image: Image.Image, path: str | Path) -> Path:
    """Write *image* to *path*, creating parent folders."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path)
    return path
