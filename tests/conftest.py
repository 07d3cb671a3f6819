import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]

# Make the package importable without installing it.
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from imagemanip.buffer import PixelBuffer  # noqa: E402


@pytest.fixture
def quad():
    """2x2 image used for the median black/white example."""
    return PixelBuffer(np.array(
        [
            [[10, 20, 30], [200, 100, 50]],
            [[0, 0, 0], [255, 255, 255]],
        ],
        dtype=np.uint8,
    ))


@pytest.fixture
def noise_image():
    """Non-square random image (5 wide, 3 tall)."""
    rng = np.random.default_rng(1234)
    return PixelBuffer(rng.integers(0, 256, size=(3, 5, 3), dtype=np.uint8))


@pytest.fixture
def all_colors():
    """A sample of RGB values covering corners of the cube plus random points."""
    rng = np.random.default_rng(99)
    corners = np.array(
        [[r, g, b] for r in (0, 255) for g in (0, 255) for b in (0, 255)],
        dtype=np.uint8,
    )
    extra = rng.integers(0, 256, size=(500, 3), dtype=np.uint8)
    grays = np.repeat(np.arange(0, 256, 17, dtype=np.uint8)[:, None], 3, axis=1)
    return np.concatenate([corners, extra, grays])
