"""Exception types raised while building a collage."""

from __future__ import annotations


class CollageError(Exception):
    """Base class for every error raised by rainbow_collage."""


class InvalidImageError(CollageError, ValueError):
    """An image cannot be reduced to a colour (zero area, not an image)."""


class GridSizeMismatchError(CollageError, ValueError):
    """Grid dimensions do not match the number of supplied image slots."""


class MergeError(CollageError, RuntimeError):
    """The default grid merger could not compose the collage."""


class ConfigError(CollageError, ValueError):
    """A parameter is outside its valid range."""


class MissingColorKeyError(CollageError, ValueError):
    """Sorting was attempted before every entry had a colour key."""
