"""
Filter Image Pipeline
Loads one grayscale image, applies the selected filter and saves the result.
"""

from pathlib import Path
import logging

from ..config import RunConfig
from ..services.image_service import ImageService
from ..services.filter_service import FilterService

logger = logging.getLogger(__name__)


def filter_image(
    config: RunConfig,
    *,
    image_service: ImageService = None,
    filter_service: FilterService = None,
) -> Path:
    """
    Run a single load → filter → save pass.

    Args:
        config: Parsed, immutable run configuration
        image_service: Service for image I/O
        filter_service: Service for filtering

    Returns:
        Path: Where the filtered image was written
    """
    image_service = image_service or ImageService()
    filter_service = filter_service or FilterService()

    # Fail on a bad filter/mask before touching the file system
    spec = filter_service.get_spec(config.filter_type, config.mask_size)

    src = image_service.load(config.input_path)
    logger.info(f"Loaded {src.path}: {src.width}x{src.height}")

    dst = filter_service.apply(src, spec)

    saved = image_service.save(dst, config.output_path)
    logger.info(f"Wrote {saved}")
    return saved
