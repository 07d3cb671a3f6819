"""
Pixel transformation library.

This package contains:
- PixelBuffer, an in-memory RGB raster
- RGB <-> HSL conversion
- Point operators (grayscale, invert, sepia, warm, hue/saturation/lightness)
- Stylized black/white via median luminance
- Weighted blending and the layered Instagram-like filter
- 90° rotations
- Image loading/saving and a small orchestration engine
"""

from .buffer import RGB, PixelBuffer
from .color_model import HSL, hsl_to_rgb, rgb_to_hsl
from .compositor import blend, normalize_weights
from .engine import OPERATIONS, Engine
from .errors import (
    ImageIOError,
    ImageManipError,
    OutOfRangeError,
    ShapeMismatchError,
    UnknownOperationError,
)
from .filters import instagram
from .geom_ops import rotate_180, rotate_ccw, rotate_cw
from .image_io import load, save
from .point_ops import grayscale, invert, sepia, set_hue, set_lightness, set_saturation, warm
from .stylize import luminance, median_luminance, stylize_bw, threshold

__version__ = "1.0.0"

__all__ = [
    "HSL",
    "RGB",
    "Engine",
    "ImageIOError",
    "ImageManipError",
    "OPERATIONS",
    "OutOfRangeError",
    "PixelBuffer",
    "ShapeMismatchError",
    "UnknownOperationError",
    "blend",
    "grayscale",
    "hsl_to_rgb",
    "instagram",
    "invert",
    "load",
    "luminance",
    "median_luminance",
    "normalize_weights",
    "rgb_to_hsl",
    "rotate_180",
    "rotate_ccw",
    "rotate_cw",
    "save",
    "sepia",
    "set_hue",
    "set_lightness",
    "set_saturation",
    "stylize_bw",
    "threshold",
    "warm",
]
