"""Orientation of card images."""
from __future__ import annotations

from PIL import Image


def reverse(img: Image.Image) -> Image.Image:
    """
    Return a copy of `img` rotated 180 degrees about its centre.

    Pixel (x, y) of the result is pixel (w-1-x, h-1-y) of the source. This is
    a transpose, not a resample, so no pixel values change. `img` is left
    untouched.
    """
    return img.transpose(Image.Transpose.ROTATE_180)


def orient(img: Image.Image, reversed_: bool) -> Image.Image:
    """Apply :func:`reverse` only for reversed cards."""
    return reverse(img) if reversed_ else img
