"""
Colour Transformation Pipeline
Applies a 3x3 colour matrix to every pixel of an image and writes the result.
"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

from models.colour_matrix import ColourMatrix
from models.image import Image
from repositories.image_repository import OUTPUT_FORMAT, JPEG_QUALITY
from services.image_service import ImageService
from services.pixel_transformer import PixelTransformer

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Output file, relative to the working directory unless absolute
OUTPUT_PATH = os.getenv("OUTPUT_IMAGE_PATH", "out.jpg")


def transform_and_save(
    image: Image,
    matrix: ColourMatrix,
    *,
    output_path: str | Path = OUTPUT_PATH,
    image_service: ImageService = ImageService(),
    output_format: str = OUTPUT_FORMAT,
    quality: int = JPEG_QUALITY,
) -> Path:
    """
    Transform an already loaded *image* in place and save it to *output_path*,
    overwriting anything already there.

    Returns:
        Path: where the transformed image was written
    """
    transformer = PixelTransformer(matrix)
    transformer.transform(image)

    saved = image_service.save_as(
        transformer.get_image(), output_path, format=output_format, quality=quality
    )
    logger.info(f"Wrote transformed image to {saved}")
    return saved


def transform_image_file(
    input_path: str | Path,
    matrix: ColourMatrix,
    *,
    output_path: str | Path = OUTPUT_PATH,
    image_service: ImageService = ImageService(),
    output_format: str = OUTPUT_FORMAT,
    quality: int = JPEG_QUALITY,
) -> Path:
    """
    Load the image at *input_path*, apply *matrix* and save to *output_path*.

    Raises FileNotFoundError (or TimeoutError) when the input can't be decoded;
    nothing is written in that case.
    """
    image = image_service.load(input_path)
    width, height = image_service.get_image_dimensions(image)
    logger.info(f"Loaded {input_path} ({width}x{height})")

    return transform_and_save(
        image,
        matrix,
        output_path=output_path,
        image_service=image_service,
        output_format=output_format,
        quality=quality,
    )
