"""
Per-pixel tone and colour operators.

Every operator takes a PixelBuffer, touches all W x H pixels and returns a new
PixelBuffer; results are clamped to [0, 255]. Parameters are validated before
any pixel is processed.
"""

from __future__ import annotations

import logging

import numpy as np

from .buffer import PixelBuffer, clamp_u8
from .color_model import hsl_array_to_rgb, rgb_array_to_hsl
from .config import FilterConfig, SepiaConfig
from .validation import finite_number, unit_interval

logger = logging.getLogger(__name__)


# ============================================================================
# Tonal operators
# ============================================================================

def grayscale(image: PixelBuffer) -> PixelBuffer:
    """Set every channel to floor((r + g + b) / 3)."""
    arr = image.pixels.astype(np.int32)
    avg = arr.sum(axis=-1) // 3
    out = np.repeat(avg[..., None], 3, axis=-1)
    return PixelBuffer(clamp_u8(out))


def invert(image: PixelBuffer) -> PixelBuffer:
    """c' = 255 - c"""
    return PixelBuffer(255 - image.pixels)


def sepia(image: PixelBuffer) -> PixelBuffer:
    """
    Classic sepia matrix.

    The matrix rows sum past 1.0, so bright input overshoots 255; values are
    truncated and then clamped.
    """
    arr = image.pixels.astype(np.float64)
    matrix = np.asarray(SepiaConfig.MATRIX, dtype=np.float64)
    out = arr @ matrix.T
    return PixelBuffer(clamp_u8(np.trunc(out)))


def warm(
    image: PixelBuffer,
    red_gain: float = FilterConfig.WARM_RED_GAIN,
    blue_divisor: float = FilterConfig.WARM_BLUE_DIVISOR,
) -> PixelBuffer:
    """
    Warm tint: boost red, cut blue, leave green.

        r = r * 1.2
        g = g
        b = b / 1.5
    """
    red_gain = finite_number(red_gain, "red_gain")
    blue_divisor = finite_number(blue_divisor, "blue_divisor")
    if blue_divisor <= 0.0:
        raise ValueError(f"blue_divisor must be positive, got {blue_divisor}")

    arr = image.pixels.astype(np.float64)
    arr[..., 0] *= red_gain
    arr[..., 2] /= blue_divisor
    return PixelBuffer(clamp_u8(arr))


# ============================================================================
# HSL overrides
# ============================================================================

def _with_hsl(image: PixelBuffer, hue=None, saturation=None, lightness=None) -> PixelBuffer:
    h, s, l = rgb_array_to_hsl(image.pixels)
    if hue is not None:
        h = np.full_like(h, hue)
    if saturation is not None:
        s = np.full_like(s, saturation)
    if lightness is not None:
        l = np.full_like(l, lightness)
    return PixelBuffer(hsl_array_to_rgb(h, s, l))


def set_hue(image: PixelBuffer, hue) -> PixelBuffer:
    """
    Set the hue of every pixel.

    Args:
        hue: degrees; any finite value, normalised modulo 360

    Raises:
        ValueError: if hue is not a finite number
    """
    hue = finite_number(hue, "hue") % 360.0
    logger.debug("set_hue %.2f on %dx%d", hue, image.width, image.height)
    return _with_hsl(image, hue=hue)


def set_saturation(image: PixelBuffer, saturation) -> PixelBuffer:
    """Set the HSL saturation of every pixel; saturation must lie in [0, 1]."""
    saturation = unit_interval(saturation, "saturation")
    logger.debug("set_saturation %.3f on %dx%d", saturation, image.width, image.height)
    return _with_hsl(image, saturation=saturation)


def set_lightness(image: PixelBuffer, lightness) -> PixelBuffer:
    """Set the HSL lightness of every pixel; lightness must lie in [0, 1]."""
    lightness = unit_interval(lightness, "lightness")
    logger.debug("set_lightness %.3f on %dx%d", lightness, image.width, image.height)
    return _with_hsl(image, lightness=lightness)
