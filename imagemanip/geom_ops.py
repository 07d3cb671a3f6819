"""
Geometric transformations for images.

Pure coordinate permutations, no interpolation.
"""

import numpy as np

from .buffer import PixelBuffer


def rotate_cw(image: PixelBuffer) -> PixelBuffer:
    """
    Rotate 90° clockwise.

    dest is src.height wide and src.width tall, and
    dest[x, y] = src[y, src.height - 1 - x].
    """
    return PixelBuffer(np.rot90(image.pixels, k=3, axes=(0, 1)))


def rotate_ccw(image: PixelBuffer) -> PixelBuffer:
    """Rotate 90° counter-clockwise."""
    return PixelBuffer(np.rot90(image.pixels, k=1, axes=(0, 1)))


def rotate_180(image: PixelBuffer) -> PixelBuffer:
    """Rotate 180°."""
    return PixelBuffer(np.rot90(image.pixels, k=2, axes=(0, 1)))
