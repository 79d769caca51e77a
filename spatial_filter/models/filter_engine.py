"""
Host-side replacement for the vendor GPU filter primitives.

• Correlates an 8-bit Image with a small odd-sized Kernel.
• Out-of-bounds taps follow the FilterSpec border policy (replicate only).
• Pure: no logging, no I/O.
"""
from __future__ import annotations
import numpy as np

from .image import Image
from .kernel import BorderPolicy, FilterSpec, Kernel
from ..exceptions import KernelTooLargeForImage

_PAD_MODES = {
    BorderPolicy.REPLICATE: "edge",
}


class SpatialFilterEngine:

    def apply(self, image: Image, spec: FilterSpec) -> Image:
        """
        Args
        ----
        image : Image      single-channel uint8 input, any stride
        spec  : FilterSpec kernel + border policy

        Returns
        -------
        Image  same width/height, fresh buffer with stride == width
        """
        kernel = spec.kernel
        if image.width < kernel.width or image.height < kernel.height:
            raise KernelTooLargeForImage(image.size, (kernel.width, kernel.height))

        acc = self._correlate(image.pixels, kernel, spec.border)
        out = self._saturate(acc / kernel.divisor)
        return Image.from_pixels(out)

    # --------------------------------------------------
    @staticmethod
    def _correlate(pixels: np.ndarray, kernel: Kernel, border: BorderPolicy) -> np.ndarray:
        height, width = pixels.shape
        ax, ay = kernel.anchor

        # Pad so that padded[y + j, x + i] is the sample for tap (i, j) of output (x, y)
        pad = ((ay, kernel.height - 1 - ay), (ax, kernel.width - 1 - ax))
        padded = np.pad(pixels.astype(np.float64), pad, mode=_PAD_MODES[border])

        acc = np.zeros((height, width), dtype=np.float64)
        for j in range(kernel.height):
            for i in range(kernel.width):
                w = kernel.weights[j, i]
                if w == 0:
                    continue
                acc += w * padded[j:j + height, i:i + width]
        return acc

    @staticmethod
    def _saturate(values: np.ndarray) -> np.ndarray:
        # round-half-to-even, then clamp instead of wrapping
        return np.clip(np.rint(values), 0, 255).astype(np.uint8)
