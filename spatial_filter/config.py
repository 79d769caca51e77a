from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import os

from dotenv import load_dotenv

from .exceptions import InvalidArgument
from .models.kernel import FilterType, DEFAULT_MASK_SIZE

# Load environment variables
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """
    Process-wide defaults, read from the environment (.env supported).
    """
    output_path: Path = Path("./data/output_image.pgm")
    default_filter: str = "gaussian"
    default_mask_size: int = 5
    search_dirs: Tuple[Path, ...] = (Path("."), Path("data"), Path("../data"))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        dirs = os.getenv("IMAGE_SEARCH_DIRS", ".,data,../data")
        mask = os.getenv("DEFAULT_MASK_SIZE", "5")
        try:
            mask_size = int(mask)
        except ValueError:
            raise InvalidArgument(f"DEFAULT_MASK_SIZE must be an integer, got {mask!r}") from None
        return cls(
            output_path=Path(os.getenv("OUTPUT_IMAGE_PATH", "./data/output_image.pgm")),
            default_filter=os.getenv("DEFAULT_FILTER_TYPE", "gaussian"),
            default_mask_size=mask_size,
            search_dirs=tuple(Path(d.strip()) for d in dirs.split(",") if d.strip()),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@dataclass(frozen=True)
class RunConfig:
    """
    Immutable result of command-line parsing, handed to the pipeline.
    """
    input_path: Path
    filter_type: FilterType = FilterType.GAUSSIAN
    mask_size: int = DEFAULT_MASK_SIZE
    output_path: Path = Path("./data/output_image.pgm")
