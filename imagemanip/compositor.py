"""
Weighted blending of two equally sized buffers.
"""

from __future__ import annotations

import logging

import numpy as np

from .buffer import PixelBuffer, clamp_u8
from .errors import ShapeMismatchError
from .validation import finite_number

logger = logging.getLogger(__name__)


def normalize_weights(weight_a: float, weight_b: float) -> tuple[float, float]:
    """
    Scale a weight pair so it sums to 1, keeping the ratio.

    Example:
        >>> normalize_weights(0.95, 0.5)
        (0.6551724137931034, 0.3448275862068966)
    """
    weight_a = finite_number(weight_a, "weight_a")
    weight_b = finite_number(weight_b, "weight_b")
    if weight_a < 0 or weight_b < 0:
        raise ValueError(f"Weights must be non-negative, got ({weight_a}, {weight_b})")
    total = weight_a + weight_b
    if total <= 0.0:
        raise ValueError("Weights must not both be zero")
    return weight_a / total, weight_b / total


def blend(a: PixelBuffer, b: PixelBuffer, weight_a: float, weight_b: float) -> PixelBuffer:
    """
    Per channel: trunc(clamp(weight_a * a + weight_b * b, 0, 255)).

    Weights are applied as given. Pairs summing above 1 brighten and can
    saturate at 255; use normalize_weights for a plain mix.

    Raises:
        ValueError: if a weight is not a finite number
        ShapeMismatchError: if a and b differ in width or height
    """
    weight_a = finite_number(weight_a, "weight_a")
    weight_b = finite_number(weight_b, "weight_b")
    if a.size != b.size:
        raise ShapeMismatchError(
            f"Cannot blend {a.width}x{a.height} with {b.width}x{b.height}"
        )

    mixed = (
        weight_a * a.pixels.astype(np.float64)
        + weight_b * b.pixels.astype(np.float64)
    )
    logger.debug("blend %dx%d weights (%.3f, %.3f)", a.width, a.height, weight_a, weight_b)
    return PixelBuffer(clamp_u8(mixed))
