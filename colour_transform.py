#!/usr/bin/env python3
"""
Colour Transform command line.

Usage:
    colour-transform INPUT_IMAGE < matrix.txt

Nine numbers are read from stdin (row-major 3x3 matrix). The transformed
image is written as JPEG to $OUTPUT_IMAGE_PATH (default: out.jpg).
"""

import os
import sys
import logging
from typing import List, Optional, TextIO

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from pipeline.colour_transformation import transform_and_save, OUTPUT_PATH
from repositories.matrix_repository import MatrixRepository
from services.image_service import ImageService

logger = logging.getLogger(__name__)

MISSING_INPUT_MSG = "Please specify an input file."
UNREADABLE_INPUT_MSG = "Input file does not exist."


def _configure_logging() -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    output_path: Optional[str] = None,
) -> int:
    _configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    stdin = sys.stdin if stdin is None else stdin
    output_path = output_path or OUTPUT_PATH

    if not argv:
        print(MISSING_INPUT_MSG)
        return 1

    image_service = ImageService()
    try:
        image = image_service.load(argv[0])
    except (FileNotFoundError, TimeoutError) as err:
        logger.debug(f"Failed to load input: {err}")
        print(UNREADABLE_INPUT_MSG)
        return 1

    width, height = image_service.get_image_dimensions(image)
    logger.info(f"Loaded {image.path} ({width}x{height})")

    # Malformed matrix input is not handled here; it surfaces as a traceback
    matrix = MatrixRepository.read(stdin)

    transform_and_save(image, matrix, output_path=output_path, image_service=image_service)
    return 0


if __name__ == "__main__":
    sys.exit(main())
