from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple
import numpy as np

from ..exceptions import InvalidArgument


class BorderPolicy(str, Enum):
    """How a kernel tap outside the image bounds is resolved."""
    REPLICATE = "replicate"  # clamp to the nearest edge sample


class FilterType(str, Enum):
    GAUSSIAN = "gaussian"
    LAPLACE = "laplace"

    @classmethod
    def from_name(cls, name: str) -> "FilterType":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidArgument(f"Unknown filter type: {name}") from None


@dataclass(frozen=True, eq=False)
class Kernel:
    """
    Value-object holding filter weights and their normalisation divisor.
    weights[j, i] is the tap at column i, row j; the anchor is the centre cell.
    """
    weights: np.ndarray = field(repr=False)
    divisor: float = 1.0

    def __post_init__(self):
        w = np.array(self.weights, dtype=np.float64)
        if w.ndim != 2 or w.size == 0:
            raise ValueError(f"Kernel weights must be a non-empty 2D array, got shape {w.shape}")
        if w.shape[0] % 2 == 0 or w.shape[1] % 2 == 0:
            raise ValueError(f"Kernel dimensions must be odd, got {w.shape[1]}x{w.shape[0]}")
        if self.divisor == 0:
            raise ValueError("Kernel divisor must be non-zero")
        w.flags.writeable = False
        object.__setattr__(self, "weights", w)

    @property
    def width(self) -> int:
        return self.weights.shape[1]

    @property
    def height(self) -> int:
        return self.weights.shape[0]

    @property
    def anchor(self) -> Tuple[int, int]:
        return self.width // 2, self.height // 2


@dataclass(frozen=True)
class FilterSpec:
    filter_type: FilterType
    kernel: Kernel
    border: BorderPolicy = BorderPolicy.REPLICATE

    @property
    def name(self) -> str:
        return f"{self.filter_type.value}-{self.kernel.width}x{self.kernel.height}"


# ─── Fixed mask tables ─────────────────────────────────────────────
# Same integer masks as the NPP FilterGauss / FilterLaplace primitives.
GAUSSIAN_3X3 = Kernel(np.array([[1, 2, 1],
                                [2, 4, 2],
                                [1, 2, 1]]), divisor=16)

GAUSSIAN_5X5 = Kernel(np.array([[2, 7, 12, 7, 2],
                                [7, 31, 52, 31, 7],
                                [12, 52, 127, 52, 12],
                                [7, 31, 52, 31, 7],
                                [2, 7, 12, 7, 2]]), divisor=571)

LAPLACE_3X3 = Kernel(np.array([[-1, -1, -1],
                               [-1, 8, -1],
                               [-1, -1, -1]]), divisor=1)

LAPLACE_5X5 = Kernel(np.array([[-1, -3, -4, -3, -1],
                               [-3, 0, 6, 0, -3],
                               [-4, 6, 20, 6, -4],
                               [-3, 0, 6, 0, -3],
                               [-1, -3, -4, -3, -1]]), divisor=1)

MASK_SIZES = (3, 5)
DEFAULT_MASK_SIZE = 5

_CATALOGUE: Dict[Tuple[FilterType, int], FilterSpec] = {
    (FilterType.GAUSSIAN, 3): FilterSpec(FilterType.GAUSSIAN, GAUSSIAN_3X3),
    (FilterType.GAUSSIAN, 5): FilterSpec(FilterType.GAUSSIAN, GAUSSIAN_5X5),
    (FilterType.LAPLACE, 3): FilterSpec(FilterType.LAPLACE, LAPLACE_3X3),
    (FilterType.LAPLACE, 5): FilterSpec(FilterType.LAPLACE, LAPLACE_5X5),
}


def filter_spec(filter_type: FilterType | str, mask_size: int = DEFAULT_MASK_SIZE) -> FilterSpec:
    """Look up the catalogued spec for a filter type and square mask size."""
    if not isinstance(filter_type, FilterType):
        filter_type = FilterType.from_name(filter_type)
    try:
        return _CATALOGUE[(filter_type, int(mask_size))]
    except KeyError:
        raise InvalidArgument(
            f"Unsupported mask size {mask_size}, expected one of {MASK_SIZES}"
        ) from None
