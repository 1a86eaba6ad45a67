from __future__ import annotations

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def quad_rgba() -> np.ndarray:
    """2x2 grid: red, red / green, transparent."""
    rgba = np.zeros((2, 2, 4), dtype=np.uint8)
    rgba[0, 0] = (255, 0, 0, 255)
    rgba[0, 1] = (255, 0, 0, 255)
    rgba[1, 0] = (0, 255, 0, 255)
    rgba[1, 1] = (0, 0, 0, 0)
    return rgba


@pytest.fixture
def mixed_rgba() -> np.ndarray:
    """Seeded 16x12 grid with a small palette, partial alpha and transparent holes."""
    rng = np.random.default_rng(7)
    palette = np.array(
        [
            (10, 20, 30, 255),
            (10, 20, 30, 128),
            (200, 0, 50, 255),
            (0, 0, 0, 255),
            (9, 9, 9, 0),
            (250, 250, 250, 1),
        ],
        dtype=np.uint8,
    )
    idx = rng.integers(0, len(palette), size=(12, 16))
    return palette[idx]


@pytest.fixture
def write_png(tmp_path):
    def _write(rgba: np.ndarray, name: str = "src.png"):
        path = tmp_path / name
        Image.fromarray(rgba).save(path)
        return path

    return _write
