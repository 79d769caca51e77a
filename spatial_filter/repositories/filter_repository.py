from ..models.filter_engine import SpatialFilterEngine
from ..models.image import Image
from ..models.kernel import FilterSpec


class FilterRepository:
    """
    Thin wrapper around SpatialFilterEngine, working on Image entities.
    """

    def __init__(self):
        self.engine = SpatialFilterEngine()

    def run_filter(self, image: Image, spec: FilterSpec) -> Image:
        return self.engine.apply(image, spec)
