"""
Operator constants and environment-driven settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class SepiaConfig:
    """Sepia colour matrix, rows produce R', G', B'."""
    MATRIX = (
        (0.393, 0.769, 0.189),
        (0.349, 0.686, 0.168),
        (0.272, 0.534, 0.131),
    )


class FilterConfig:
    """Instagram-style filter parameters."""
    WARM_RED_GAIN: float = 1.2
    WARM_BLUE_DIVISOR: float = 1.5

    HALO_WEIGHTS: tuple[float, float] = (0.65, 0.35)   # image, halo
    GRAIN_RATIO: tuple[float, float] = (0.95, 0.5)     # image, grain (normalised before use)

    GRAIN_AMPLITUDE: float = 48.0   # +/- around mid gray


class RawConfig:
    """Camera RAW extensions routed through rawpy."""
    EXTENSIONS = frozenset({".raf", ".dng", ".nef", ".arw", ".cr2", ".cr3"})


def _optional_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings, read from the environment (and a ``.env`` file if present).

    IMAGEMANIP_HALO_PATH / IMAGEMANIP_GRAIN_PATH  optional overlay images
    IMAGEMANIP_GRAIN_SEED                         seed for procedural grain
    IMAGEMANIP_DEFAULT_FORMAT                     save format fallback
    IMAGEMANIP_LOG_LEVEL                          logging level name
    """
    halo_path: Optional[Path] = None
    grain_path: Optional[Path] = None
    grain_seed: int = 42
    default_format: str = "PNG"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            halo_path=_optional_path("IMAGEMANIP_HALO_PATH"),
            grain_path=_optional_path("IMAGEMANIP_GRAIN_PATH"),
            grain_seed=_int_env("IMAGEMANIP_GRAIN_SEED", 42),
            default_format=os.getenv("IMAGEMANIP_DEFAULT_FORMAT", "PNG").upper(),
            log_level=os.getenv("IMAGEMANIP_LOG_LEVEL", "INFO").upper(),
        )
