"""
RGB <-> HSL conversion.

The array functions hold the math; the single-pixel helpers wrap a 1x1 array
so every hue/saturation/lightness operator shares one implementation.

HSL convention: hue in degrees [0, 360), saturation and lightness in [0, 1].
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .buffer import RGB


class HSL(NamedTuple):
    hue: float
    saturation: float
    lightness: float


# ============================================================================
# Array conversions
# ============================================================================

def rgb_array_to_hsl(rgb: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert an (..., 3) RGB array (0..255) into hue, saturation, lightness planes.

    Returns:
        (hue, saturation, lightness), float64 arrays of shape rgb.shape[:-1]
    """
    arr = np.asarray(rgb, dtype=np.float64) / 255.0
    r = arr[..., 0]
    g = arr[..., 1]
    b = arr[..., 2]

    maxc = arr.max(axis=-1)
    minc = arr.min(axis=-1)
    delta = maxc - minc

    lightness = (maxc + minc) / 2.0

    # Achromatic pixels (delta == 0) get s = 0 and h = 0
    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    denom = 1.0 - np.abs(2.0 * lightness - 1.0)
    saturation = np.where(chromatic, delta / np.where(denom > 0, denom, 1.0), 0.0)
    saturation = np.clip(saturation, 0.0, 1.0)

    # Red wins ties, then green
    hue = np.select(
        [~chromatic, maxc == r, maxc == g],
        [
            0.0,
            ((g - b) / safe_delta) % 6.0,
            (b - r) / safe_delta + 2.0,
        ],
        default=(r - g) / safe_delta + 4.0,
    )
    hue = (hue * 60.0) % 360.0

    return hue, saturation, lightness


def hsl_array_to_rgb(hue, saturation, lightness) -> np.ndarray:
    """
    Convert hue/saturation/lightness planes back to a uint8 (..., 3) RGB array.

    Channels are rounded to nearest and clamped to [0, 255].
    """
    h = np.mod(np.asarray(hue, dtype=np.float64), 360.0)
    s = np.asarray(saturation, dtype=np.float64)
    l = np.asarray(lightness, dtype=np.float64)
    h, s, l = np.broadcast_arrays(h, s, l)

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    h_prime = h / 60.0
    x = chroma * (1.0 - np.abs(h_prime % 2.0 - 1.0))
    m = l - chroma / 2.0
    zero = np.zeros_like(chroma)

    sector = np.floor(h_prime).astype(np.int64) % 6
    conditions = [sector == i for i in range(6)]

    r1 = np.select(conditions, [chroma, x, zero, zero, x, chroma])
    g1 = np.select(conditions, [x, chroma, chroma, x, zero, zero])
    b1 = np.select(conditions, [zero, zero, x, chroma, chroma, x])

    rgb = np.stack([r1 + m, g1 + m, b1 + m], axis=-1) * 255.0
    return np.clip(np.rint(rgb), 0, 255).astype(np.uint8)


# ============================================================================
# Single pixel
# ============================================================================

def rgb_to_hsl(value) -> HSL:
    """Convert one RGB triple to HSL."""
    h, s, l = rgb_array_to_hsl(np.asarray(value, dtype=np.float64).reshape(1, 3))
    return HSL(float(h[0]), float(s[0]), float(l[0]))


def hsl_to_rgb(value) -> RGB:
    """Convert one HSL triple to RGB."""
    hue, saturation, lightness = value
    r, g, b = hsl_array_to_rgb([hue], [saturation], [lightness])[0]
    return RGB(int(r), int(g), int(b))
