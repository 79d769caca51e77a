#!/usr/bin/env python3
"""
spatial-filter: apply a Gaussian or Laplacian filter to a grayscale image.

    spatial-filter --input lena.pgm [-f gaussian|laplace] [--mask 3|5]

The result always goes to OUTPUT_IMAGE_PATH (./data/output_image.pgm).
Exit status is 0 on success and 1 on any failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..config import RunConfig, Settings
from ..exceptions import InvalidArgument, SpatialFilterError
from ..models.kernel import MASK_SIZES, FilterType
from ..pipeline.filter_image import filter_image
from ..services.filter_service import FilterService
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)

PROG = "spatial-filter"


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with status 2 on bad usage; report it as InvalidArgument instead."""

    def error(self, message):
        raise InvalidArgument(message)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = _ArgumentParser(prog=PROG, description="Gaussian blur / Laplacian edge filter for 8-bit grayscale images.")
    ap.add_argument("--input", required=True,
                    help="Input image (PGM or any grayscale-readable format); also searched in IMAGE_SEARCH_DIRS")
    ap.add_argument("-f", dest="filter_type", default=settings.default_filter,
                    help="Filter type: gaussian or laplace (default: %(default)s)")
    ap.add_argument("--mask", type=int, default=settings.default_mask_size,
                    help=f"Square mask size, one of {MASK_SIZES} (default: %(default)s)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def parse_args(
    argv: Optional[List[str]],
    settings: Settings,
    image_service: ImageService = None,
) -> RunConfig:
    """Turn the command line into an immutable RunConfig, resolving the input file."""
    args = build_parser(settings).parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.input:
        raise InvalidArgument("--input requires a file name")
    filter_type = FilterType.from_name(args.filter_type)
    if args.mask not in MASK_SIZES:
        raise InvalidArgument(f"Unsupported mask size {args.mask}, expected one of {MASK_SIZES}")

    image_service = image_service or ImageService()
    input_path = image_service.find(args.input, settings.search_dirs)

    return RunConfig(
        input_path=input_path,
        filter_type=filter_type,
        mask_size=args.mask,
        output_path=settings.output_path,
    )


def main(argv: Optional[List[str]] = None) -> int:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    print(f"{PROG} Starting...\n")

    try:
        settings = Settings.from_env()
        logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.INFO))

        config = parse_args(argv, settings)

        print(f"Filename Value: {config.input_path}")
        print(f"Filter Type Value: {config.filter_type.value} ({config.mask_size}x{config.mask_size})")
        print(FilterService.describe_runtime())

        saved = filter_image(config)
        print(f"Saved image: {saved}")
        return 0

    except SpatialFilterError as err:
        print("Program error! The following exception occurred: ", file=sys.stderr)
        print(f"{type(err).__name__}: {err}", file=sys.stderr)
        print("Aborting.", file=sys.stderr)
        return err.exit_code

    except Exception as err:
        logger.debug("Unexpected failure", exc_info=err)
        print("Program error! An unknown type of exception occurred.", file=sys.stderr)
        print(f"{type(err).__name__}: {err}", file=sys.stderr)
        print("Aborting.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
