from __future__ import annotations

import logging
import platform

import numpy as np
import cv2
import PIL

from ..models.image import Image
from ..models.kernel import DEFAULT_MASK_SIZE, FilterSpec, FilterType, filter_spec
from ..repositories.filter_repository import FilterRepository

logger = logging.getLogger(__name__)


class FilterService:
    """
    Business logic on top of the filter engine repository.
    Resolves filter names to catalogued specs and runs them.
    """

    def __init__(self):
        self.filter_repository = FilterRepository()

    @staticmethod
    def get_spec(filter_type: FilterType | str, mask_size: int = DEFAULT_MASK_SIZE) -> FilterSpec:
        return filter_spec(filter_type, mask_size)

    def apply(self, img: Image, spec: FilterSpec) -> Image:
        """
        Run one filter over the whole image and return a *new* Image.

        Args:
            img (Image): Grayscale input image
            spec (FilterSpec): Kernel and border policy to apply
        Returns:
            Image: Filtered image with the same width and height.
        """
        logger.info(f"Applying {spec.name} ({spec.border.value} border) to {img.width}x{img.height} image")
        out = self.filter_repository.run_filter(img, spec)
        logger.debug(f"Output range: [{int(out.pixels.min())}, {int(out.pixels.max())}]")
        return out

    @staticmethod
    def describe_runtime() -> str:
        """Host counterpart of a device/library version report."""
        return (
            f"Host backend: Python {platform.python_version()}, NumPy {np.__version__}, "
            f"OpenCV {cv2.__version__}, Pillow {PIL.__version__}"
        )
