"""
Pytest configuration and shared fixtures for spatial-filter tests.
"""

from pathlib import Path

import numpy as np
import pytest


def pgm_bytes(pixels: np.ndarray) -> bytes:
    """Raw 8-bit P5 encoding of a (H, W) uint8 array."""
    height, width = pixels.shape
    return b"P5\n%d %d\n255\n" % (width, height) + pixels.astype(np.uint8).tobytes()


@pytest.fixture
def write_pgm(tmp_path: Path):
    """Write a P5 PGM file under tmp_path and return its path."""

    def _write(pixels: np.ndarray, name: str = "input.pgm") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pgm_bytes(pixels))
        return path

    return _write


@pytest.fixture
def bright_spot() -> np.ndarray:
    """10x10 black image with a single 255 sample at (x=5, y=5)."""
    pixels = np.zeros((10, 10), dtype=np.uint8)
    pixels[5, 5] = 255
    return pixels


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
