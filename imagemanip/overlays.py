"""
Overlay images for the layered filter.

The halo (vignette) and grain layers are either loaded from files and
resampled to the source size, or generated procedurally. Resampling only
happens here; blend() itself rejects mismatched buffers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from . import image_io
from .buffer import PixelBuffer, clamp_u8
from .config import FilterConfig, Settings

logger = logging.getLogger(__name__)


def resample(image: PixelBuffer, width: int, height: int) -> PixelBuffer:
    """Resize ``image`` to width x height (area filter when shrinking, bilinear when enlarging)."""
    if image.size == (width, height):
        return image

    shrinking = width * height < image.width * image.height
    interpolation = cv2.INTER_AREA if shrinking else cv2.INTER_LINEAR
    arr = cv2.resize(image.to_array(), (width, height), interpolation=interpolation)
    logger.debug("Resampled overlay %dx%d -> %dx%d", image.width, image.height, width, height)
    return PixelBuffer(arr)


def load_overlay(path: str | Path, width: int, height: int) -> PixelBuffer:
    """Load an overlay file and fit it to width x height."""
    return resample(image_io.load(path), width, height)


def halo_overlay(width: int, height: int) -> PixelBuffer:
    """
    White centre falling off to black in the corners.

    Intensity = 1 - r^2, r being the distance from the centre relative to
    the half diagonal.
    """
    ys = np.arange(height, dtype=np.float64) - (height - 1) / 2.0
    xs = np.arange(width, dtype=np.float64) - (width - 1) / 2.0
    half_diag_sq = max(((width - 1) / 2.0) ** 2 + ((height - 1) / 2.0) ** 2, 1.0)

    r_sq = (xs[None, :] ** 2 + ys[:, None] ** 2) / half_diag_sq
    intensity = np.clip(1.0 - r_sq, 0.0, 1.0) * 255.0
    return PixelBuffer(clamp_u8(np.repeat(intensity[..., None], 3, axis=-1)))


def grain_overlay(width: int, height: int, seed: int = 42,
                  amplitude: float = FilterConfig.GRAIN_AMPLITUDE) -> PixelBuffer:
    """Deterministic monochrome noise around mid gray."""
    rng = np.random.default_rng(seed)
    noise = 128.0 + rng.uniform(-amplitude, amplitude, size=(height, width))
    return PixelBuffer(clamp_u8(np.repeat(noise[..., None], 3, axis=-1)))


def resolve_overlays(
    width: int,
    height: int,
    settings: Optional[Settings] = None,
) -> tuple[PixelBuffer, PixelBuffer]:
    """
    Halo and grain overlays sized width x height.

    Configured files are used when set, procedural overlays otherwise.
    """
    settings = settings or Settings.from_env()

    if settings.halo_path is not None:
        halo = load_overlay(settings.halo_path, width, height)
    else:
        halo = halo_overlay(width, height)

    if settings.grain_path is not None:
        grain = load_overlay(settings.grain_path, width, height)
    else:
        grain = grain_overlay(width, height, seed=settings.grain_seed)

    return halo, grain
