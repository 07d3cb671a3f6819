"""
Image file loading and saving.

Regular formats (PNG, JPEG, BMP, TIFF, ...) go through Pillow. Camera RAW
files (RAF, DNG, NEF, ARW, CR2, CR3) are demosaiced with rawpy (LibRaw) into
8-bit sRGB, using the camera white balance.

Every failure surfaces as ImageIOError, chained to the underlying cause.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import rawpy
from PIL import Image, UnidentifiedImageError

from .buffer import PixelBuffer
from .config import RawConfig
from .errors import ImageIOError

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "PNG"


def is_raw(path: str | Path) -> bool:
    return Path(path).suffix.lower() in RawConfig.EXTENSIONS


def load(path: str | Path) -> PixelBuffer:
    """
    Load an image file into a PixelBuffer.

    Args:
        path: image file path

    Returns:
        PixelBuffer in RGB order

    Raises:
        ImageIOError: if the file is missing, unreadable or not a decodable image
    """
    path = Path(path)

    if not path.is_file():
        raise ImageIOError(f"File not found: {path}")

    if is_raw(path):
        arr = _load_raw(path)
    else:
        arr = _load_pillow(path)

    image = PixelBuffer(arr)
    logger.info("Loaded %s (%dx%d)", path, image.width, image.height)
    return image


def _load_pillow(path: Path) -> np.ndarray:
    try:
        with Image.open(path) as pil_img:
            return np.array(pil_img.convert("RGB"), dtype=np.uint8)
    except UnidentifiedImageError as e:
        raise ImageIOError(f"Not a decodable image: {path}") from e
    except OSError as e:
        raise ImageIOError(f"Failed to read image {path}: {e}") from e


def _load_raw(path: Path) -> np.ndarray:
    try:
        with rawpy.imread(str(path)) as raw:
            return raw.postprocess(
                use_camera_wb=True,
                output_color=rawpy.ColorSpace.sRGB,
                output_bps=8,
            )
    except rawpy.LibRawError as e:
        raise ImageIOError(f"Failed to process RAW file {path}: {e}") from e
    except OSError as e:
        raise ImageIOError(f"Failed to read RAW file {path}: {e}") from e


def resolve_format(path: str | Path, fmt: Optional[str] = None, default: str = DEFAULT_FORMAT) -> str:
    """
    Pick the Pillow format name for a save.

    Explicit ``fmt`` wins (extension aliases such as "jpg" or "tif" are
    mapped to their format), then the path suffix, then ``default``.
    """
    registered = Image.registered_extensions()
    if fmt:
        alias = "." + fmt.lower().lstrip(".")
        return registered.get(alias, fmt.upper())
    suffix = Path(path).suffix.lower()
    if suffix in registered:
        return registered[suffix]
    return default.upper()


def save(image: PixelBuffer, path: str | Path, fmt: Optional[str] = None) -> Path:
    """
    Write ``image`` to ``path``.

    Raises:
        ImageIOError: on an unsupported format or a failed write
    """
    path = Path(path)
    fmt = resolve_format(path, fmt)

    Image.init()
    if fmt not in Image.SAVE:
        raise ImageIOError(f"Unsupported image format: {fmt}")

    try:
        Image.fromarray(image.to_array()).save(path, format=fmt)
    except (OSError, ValueError, KeyError) as e:
        raise ImageIOError(f"Failed to save {path} as {fmt}: {e}") from e

    logger.info("Saved %s (%s, %dx%d)", path, fmt, image.width, image.height)
    return path
