from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import numpy as np


@dataclass(frozen=True, eq=False)
class Image:
    """
    Single-channel 8-bit image stored row-major in a (possibly padded) buffer.
    No codec logic outside the repository layer.
    """
    width: int  # Logical width in samples.
    height: int  # Logical height in rows.
    stride: int  # Samples between the starts of consecutive rows, >= width.
    buffer: np.ndarray = field(repr=False)  # Flat uint8, length stride * height.
    path: Path | None = None  # Source or destination of the image.

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {self.width}x{self.height}")
        if self.stride < self.width:
            raise ValueError(f"Stride {self.stride} is smaller than width {self.width}")

        buf = np.asarray(self.buffer)
        if buf.dtype != np.uint8 or buf.ndim != 1:
            raise ValueError("Image buffer must be a flat uint8 array")
        if buf.size != self.stride * self.height:
            raise ValueError(
                f"Buffer holds {buf.size} samples, expected {self.stride * self.height}"
            )

        # Private frozen copy so the image stays immutable once built
        buf = np.array(buf, dtype=np.uint8, copy=True)
        buf.flags.writeable = False
        object.__setattr__(self, "buffer", buf)
        if self.path is not None:
            object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def from_pixels(cls, pixels: np.ndarray, stride: int | None = None, path=None) -> "Image":
        """
        Copy a (H, W) uint8 array into a fresh buffer.
        A stride wider than W leaves zeroed padding at the end of each row.
        """
        pixels = np.asarray(pixels)
        if pixels.ndim != 2:
            raise ValueError(f"Expected a 2D grayscale array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 samples, got {pixels.dtype}")

        height, width = pixels.shape
        stride = width if stride is None else stride
        if stride < width:
            raise ValueError(f"Stride {stride} is smaller than width {width}")

        rows = np.zeros((height, stride), dtype=np.uint8)
        rows[:, :width] = pixels
        return cls(width=width, height=height, stride=stride, buffer=rows.reshape(-1), path=path)

    @property
    def size(self):
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (H, W) view of the logical samples, stride padding excluded."""
        return self.buffer.reshape(self.height, self.stride)[:, : self.width]

    def offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside {self.width}x{self.height} image")
        return y * self.stride + x

    def at(self, x: int, y: int) -> int:
        return int(self.buffer[self.offset(x, y)])
