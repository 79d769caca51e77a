from pathlib import Path
from typing import Iterable, Union

from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No filtering logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def find(self, name: Union[str, Path], search_dirs: Iterable[Union[str, Path]] = ()) -> Path:
        """Locate an input file directly or inside one of the search directories."""
        return self.image_repository.resolve_path(name, search_dirs)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single grayscale image from disk into an Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image, path: Union[str, Path] = None) -> Path:
        """
        Business-level method to save the image, to `path` or to its own path.
        """
        return self.image_repository.save(image, path)
