"""
Stylized black/white via median luminance.

Two passes over the whole image:
1) luminance of every pixel -> sorted copy -> median (upper median for even N)
2) each pixel's own luminance compared against that median

Luminance = (.299 r^2 + .587 g^2 + .114 b^2)^(1/2)
"""

from __future__ import annotations

import logging

import numpy as np

from .buffer import PixelBuffer

logger = logging.getLogger(__name__)

_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def luminance(image: PixelBuffer) -> np.ndarray:
    """Per-pixel luminance, float64, shape (H, W)."""
    arr = image.pixels.astype(np.float64)
    return np.sqrt((arr * arr) @ _WEIGHTS)


def median_luminance(image: PixelBuffer) -> float:
    """
    Median luminance of the image.

    The sorted values are only used to pick the median; for N pixels the
    element at index N // 2 is returned, so an even N yields the upper of the
    two middle values (they are never averaged).
    """
    ordered = np.sort(luminance(image), axis=None)
    return float(ordered[ordered.size // 2])


def threshold(image: PixelBuffer, level: float) -> PixelBuffer:
    """Pure white where luminance >= level, pure black elsewhere."""
    white = luminance(image) >= level
    out = np.where(white[..., None], np.uint8(255), np.uint8(0)).astype(np.uint8)
    out = np.broadcast_to(out, (image.height, image.width, 3))
    return PixelBuffer(out)


def stylize_bw(image: PixelBuffer) -> PixelBuffer:
    """Black/white (no gray) image split at the median luminance."""
    level = median_luminance(image)
    logger.debug("stylize_bw: median luminance %.3f over %d pixels", level, image.width * image.height)
    return threshold(image, level)
