"""
Instagram-like layered filter.

1) warm tint                 r * 1.2, g, b / 1.5
2) vignette                  .65 * image + .35 * halo
3) decorative grain          image : grain at .95 : .5, normalised to sum 1
"""

from __future__ import annotations

import logging
from typing import Optional

from .buffer import PixelBuffer
from .compositor import blend, normalize_weights
from .config import FilterConfig, Settings
from .overlays import resolve_overlays
from .point_ops import warm

logger = logging.getLogger(__name__)


def instagram(
    image: PixelBuffer,
    halo: Optional[PixelBuffer] = None,
    grain: Optional[PixelBuffer] = None,
    settings: Optional[Settings] = None,
) -> PixelBuffer:
    """
    Apply the warm + vignette + grain filter.

    Args:
        image: source buffer
        halo: vignette overlay, same size as image (resolved from settings if None)
        grain: grain overlay, same size as image (resolved from settings if None)
        settings: overlay sources used when halo or grain is missing

    Raises:
        ShapeMismatchError: if an explicit overlay differs in size from image
    """
    if halo is None or grain is None:
        default_halo, default_grain = resolve_overlays(image.width, image.height, settings)
        halo = halo if halo is not None else default_halo
        grain = grain if grain is not None else default_grain

    halo_a, halo_b = FilterConfig.HALO_WEIGHTS
    grain_a, grain_b = normalize_weights(*FilterConfig.GRAIN_RATIO)

    result = warm(image)
    result = blend(result, halo, halo_a, halo_b)
    result = blend(result, grain, grain_a, grain_b)

    logger.debug("instagram filter applied to %dx%d", image.width, image.height)
    return result
