"""
Engine orchestrating load -> operator -> save.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from . import filters, geom_ops, image_io, point_ops, stylize
from .buffer import PixelBuffer
from .config import Settings
from .errors import UnknownOperationError

logger = logging.getLogger(__name__)


# name -> (callable, takes a value, takes the engine settings)
OPERATIONS: dict[str, tuple[Callable[..., PixelBuffer], bool, bool]] = {
    "grayscale": (point_ops.grayscale, False, False),
    "invert": (point_ops.invert, False, False),
    "sepia": (point_ops.sepia, False, False),
    "warm": (point_ops.warm, False, False),
    "bw": (stylize.stylize_bw, False, False),
    "hue": (point_ops.set_hue, True, False),
    "saturation": (point_ops.set_saturation, True, False),
    "lightness": (point_ops.set_lightness, True, False),
    "rotate": (geom_ops.rotate_cw, False, False),
    "rotate_ccw": (geom_ops.rotate_ccw, False, False),
    "rotate_180": (geom_ops.rotate_180, False, False),
    "instagram": (filters.instagram, False, True),
}


class Engine:
    """
    Holds the working image for a sequence of operations.

    Workflow:
        1. load() - read a file (keeps the original for reset())
        2. apply() - run operators by name, in order
        3. save() - write the current image
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings.from_env()
        self.source_path: Path | None = None

        # Image buffers
        self.original: PixelBuffer | None = None
        self.current: PixelBuffer | None = None
        self.history: list[str] = []

    @property
    def image(self) -> PixelBuffer:
        if self.current is None:
            raise RuntimeError("No image loaded")
        return self.current

    def load(self, path: str | Path) -> PixelBuffer:
        image = image_io.load(path)
        self.set_image(image)
        self.source_path = Path(path)
        return image

    def set_image(self, image: PixelBuffer) -> None:
        """Use an in-memory buffer as the working image."""
        self.original = image
        self.current = image
        self.source_path = None
        self.history = []

    def reset(self) -> PixelBuffer:
        """Discard all applied operations."""
        if self.original is None:
            raise RuntimeError("No image loaded")
        self.current = self.original
        self.history = []
        return self.current

    def apply(self, name: str, value: float | None = None) -> PixelBuffer:
        """
        Apply the operation ``name`` to the current image.

        Raises:
            UnknownOperationError: if name is not in OPERATIONS
            ValueError: if a parameterised operation gets no (or an invalid) value
            RuntimeError: if no image is loaded
        """
        try:
            operation, takes_value, needs_settings = OPERATIONS[name]
        except KeyError:
            raise UnknownOperationError(name) from None

        image = self.image
        kwargs = {"settings": self.settings} if needs_settings else {}

        if takes_value:
            if value is None:
                raise ValueError(f"Operation '{name}' requires a value")
            result = operation(image, value, **kwargs)
        else:
            if value is not None:
                logger.warning("Operation '%s' ignores value %r", name, value)
            result = operation(image, **kwargs)

        self.current = result
        self.history.append(name)
        logger.info("Applied %s -> %dx%d", name, result.width, result.height)
        return result

    def save(self, path: str | Path, fmt: str | None = None) -> Path:
        return image_io.save(self.image, path, fmt or _format_for(path, self.settings))


def _format_for(path: str | Path, settings: Settings) -> str:
    return image_io.resolve_format(path, default=settings.default_format)
