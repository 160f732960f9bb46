"""Perceptual ordering of images by their mean HSV colour.

Colour keys are computed with a fan-out/join over a thread pool: one task per
entry, all submitted before any is awaited, each writing only its own slot.
Sorting starts once the pool has been shut down, i.e. after every task has
finished.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from PIL import Image

from rainbow_collage.color_utils import ColorKey, check_hue_scale, color_key
from rainbow_collage.errors import MissingColorKeyError

logger = logging.getLogger(__name__)

# Blank cells sort after every real image and end up in the bottom-right corner.
BLANK_KEY = ColorKey(hue=math.inf, saturation=math.inf, value=math.inf)


@dataclass
class Entry:
    """One grid slot: an image handle (``None`` = blank) and its colour key."""

    image: Image.Image | None
    color: ColorKey | None = None

    @property
    def is_blank(self) -> bool:
        return self.image is None


def make_entries(images: Iterable[Image.Image | None]) -> list[Entry]:
    """Wrap each image handle in an :class:`Entry` with no colour yet."""
    return [Entry(image=img) for img in images]


def _compute_slot(entries: list[Entry], i: int, hue_scale: float) -> None:
    entry = entries[i]
    entry.color = BLANK_KEY if entry.is_blank else color_key(entry.image, hue_scale)


def compute_color_keys(
    entries: list[Entry],
    workers: int | None = None,
    hue_scale: float = 360.0,
) -> None:
    """Populate ``color`` on every entry concurrently.

    Raises the first failure (in entry order) once all tasks have joined.
    """
    check_hue_scale(hue_scale)
    t0 = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="color") as ex:
        futures = [
            ex.submit(_compute_slot, entries, i, hue_scale)
            for i in range(len(entries))
        ]
    for fut in futures:
        fut.result()

    logger.info(
        "Colour keys ready for %d entries  (%.2f s)",
        len(entries), time.perf_counter() - t0,
    )
    for i, e in enumerate(entries):
        logger.debug("  entry %d  %s", i, "blank" if e.is_blank else e.color)


def sort_entries(entries: list[Entry]) -> None:
    """Sort in place, ascending on (hue, saturation, value)."""
    missing = [i for i, e in enumerate(entries) if e.color is None]
    if missing:
        msg = f"Colour key not computed for entries {missing}"
        raise MissingColorKeyError(msg)
    entries.sort(key=lambda e: e.color)


def sort_by_hsv(
    entries: list[Entry],
    workers: int | None = None,
    hue_scale: float = 360.0,
) -> None:
    """Compute every colour key, then sort *entries* in place."""
    compute_color_keys(entries, workers=workers, hue_scale=hue_scale)
    sort_entries(entries)
