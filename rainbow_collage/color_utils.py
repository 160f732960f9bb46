"""Colour reduction: mean image colour and RGB → HSV sort keys."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from PIL import Image
from skimage.color import rgb2hsv

from rainbow_collage.errors import ConfigError, InvalidImageError


@dataclass(frozen=True, order=True)
class ColorKey:
    """HSV sort key of one image.

    Field order defines the comparison: hue first, then saturation, then value.
    """

    hue: float
    saturation: float
    value: float


def validate_image(image: object) -> Image.Image:
    """Reject anything that cannot be averaged (non-images, zero area)."""
    if not isinstance(image, Image.Image):
        msg = f"Expected a PIL image, got {type(image).__name__}"
        raise InvalidImageError(msg)
    if image.width <= 0 or image.height <= 0:
        msg = f"Image has zero area ({image.width}x{image.height})"
        raise InvalidImageError(msg)
    return image


def is_high_depth(image: Image.Image) -> bool:
    """True for 16/32-bit integer and float single-channel modes."""
    return image.mode in ("I", "F") or image.mode.startswith("I;16")


def to_rgb_array(image: Image.Image) -> np.ndarray:
    """(H, W, 3) uint8 RGB view of *image*, alpha dropped.

    ``I;16*`` and ``I`` are read as 16-bit values and reduced by ``>> 8``;
    ``F`` is treated as unit-interval intensity. Other modes go through
    Pillow's own RGB conversion.
    """
    if not is_high_depth(image):
        return np.asarray(image.convert("RGB"), dtype=np.uint8)

    arr = np.asarray(image)
    if image.mode == "F":
        grey = np.floor(np.clip(arr, 0.0, 1.0) * 255.0)
    else:
        grey = np.clip(arr.astype(np.int64), 0, 0xFFFF) >> 8
    return np.repeat(grey.astype(np.uint8)[..., np.newaxis], 3, axis=2)


def to_rgb(image: Image.Image) -> Image.Image:
    """8-bit RGB copy of *image* without clipping high bit-depth modes."""
    return Image.fromarray(to_rgb_array(image))


def average_color(image: Image.Image) -> np.ndarray:
    """Mean RGB of every pixel, averaged in linear (non-gamma) space.

    Alpha is ignored. The integer sum is floor-divided by the pixel count.

    Returns:
        (3,) uint8 RGB.
    """
    validate_image(image)
    pixels = to_rgb_array(image).astype(np.uint64).reshape(-1, 3)
    return (pixels.sum(axis=0) // len(pixels)).astype(np.uint8)


def rgb_to_hsv(rgb: np.ndarray) -> np.ndarray:
    """Convert flat (N, 3) uint8 RGB → (N, 3) float64 HSV, all channels in [0, 1]."""
    rgb = np.asarray(rgb, dtype=np.float64).reshape(1, -1, 3) / 255.0
    return rgb2hsv(rgb).reshape(-1, 3)


def check_hue_scale(hue_scale: float) -> None:
    """Only a positive, finite scale keeps the hue order intact."""
    if not 0.0 < hue_scale < math.inf:
        msg = f"hue_scale must be a positive finite number, got {hue_scale}"
        raise ConfigError(msg)


def color_key(image: Image.Image, hue_scale: float = 360.0) -> ColorKey:
    """Reduce *image* to its :class:`ColorKey`.

    Args:
        image: Decoded image with non-zero area.
        hue_scale: Multiplier for the unit hue. ``360`` gives degrees,
            ``60`` matches the legacy scaling. Ordering is the same for any
            positive scale.
    """
    check_hue_scale(hue_scale)
    h, s, v = rgb_to_hsv(average_color(image))[0]
    return ColorKey(hue=float(h) * hue_scale, saturation=float(s), value=float(v))
