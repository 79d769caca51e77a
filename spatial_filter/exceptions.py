"""Error taxonomy for a filtering run. Every error is terminal for the run."""

from typing import Optional, Tuple


class SpatialFilterError(Exception):
    """Base exception for all spatial-filter errors."""

    exit_code = 1


class InvalidArgument(SpatialFilterError):
    """Raised for a missing input path or an unrecognised filter name / mask size."""

    pass


class DecodeFailure(SpatialFilterError):
    """Raised when an image file is missing, unreadable or malformed."""

    def __init__(self, path, message: Optional[str] = None):
        self.path = path

        if message is None:
            message = f"Image not found or unreadable: {path}"

        super().__init__(message)


class EncodeFailure(SpatialFilterError):
    """Raised when the output image cannot be written."""

    def __init__(self, path, message: Optional[str] = None):
        self.path = path

        if message is None:
            message = f"Unable to save image: {path}"

        super().__init__(message)


class KernelTooLargeForImage(SpatialFilterError):
    """
    Raised when the image is narrower or shorter than the filter kernel.

    Border replication cannot make up for an image that does not hold
    the kernel footprint at least once.
    """

    def __init__(
        self,
        image_size: Tuple[int, int],
        kernel_size: Tuple[int, int],
        message: Optional[str] = None,
    ):
        self.image_size = image_size
        self.kernel_size = kernel_size

        if message is None:
            message = (
                f"Kernel {kernel_size[0]}x{kernel_size[1]} does not fit "
                f"image {image_size[0]}x{image_size[1]}."
            )

        super().__init__(message)
