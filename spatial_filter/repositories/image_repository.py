from pathlib import Path
from typing import Iterable, Union
import logging

import numpy as np
import cv2
from PIL import Image as PILImage

from ..models.image import Image
from ..exceptions import DecodeFailure, EncodeFailure

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O for grayscale Image entities.
    OpenCV decodes, Pillow encodes (8-bit P5 for .pgm).
    """

    @staticmethod
    def resolve_path(name: Union[str, Path], search_dirs: Iterable[Union[str, Path]] = ()) -> Path:
        """
        Return `name` if it exists, else the first search_dir/name that does.
        """
        path = Path(name)
        if path.is_file():
            return path

        if not path.is_absolute():
            for folder in search_dirs:
                candidate = Path(folder) / path
                logger.debug(f"Looking for {path} in {folder}")
                if candidate.is_file():
                    return candidate

        raise DecodeFailure(path, f"Image not found: {path}")

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        path = Path(path)
        if not path.is_file():
            raise DecodeFailure(path, f"Image not found: {path}")

        # IMREAD_GRAYSCALE reduces any readable format to one uint8 channel
        try:
            arr = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
        except cv2.error as err:
            raise DecodeFailure(path, f"Image unreadable or malformed: {path} ({err})") from err
        if arr is None or arr.size == 0:
            raise DecodeFailure(path, f"Image unreadable or malformed: {path}")

        logger.debug(f"Decoded {path}: {arr.shape[1]}x{arr.shape[0]}")
        return Image.from_pixels(np.ascontiguousarray(arr, dtype=np.uint8), path=path)

    @staticmethod
    def save(image: Image, path: Union[str, Path] = None) -> Path:
        path = Path(path) if path is not None else image.path
        if path is None:
            raise EncodeFailure(None, "No output path given for image")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            PILImage.fromarray(np.ascontiguousarray(image.pixels)).save(path)
        except (OSError, ValueError) as err:
            raise EncodeFailure(path, f"Unable to save image {path}: {err}") from err

        logger.debug(f"Encoded {image.width}x{image.height} image to {path}")
        return path
