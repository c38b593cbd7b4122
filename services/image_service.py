from pathlib import Path
from typing import Tuple, Union
import logging

import numpy as np

from models.image import Image
from repositories.image_repository import ImageRepository, OUTPUT_FORMAT, JPEG_QUALITY

logger = logging.getLogger(__name__)


class ImageService:
    """I/O helpers.  No colour math here."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image, format: str = OUTPUT_FORMAT, quality: int = JPEG_QUALITY) -> Path:
        """
        Business-level method to save the image to its current path.
        Existing files are overwritten.
        """
        return self.image_repository.save(image, format=format, quality=quality)

    def save_as(self, image: Image, path: Union[str, Path], **kwargs) -> Path:
        """
        Point the image at a new destination and save it there.
        """
        image.path = Path(path)
        return self.save(image, **kwargs)

    def copy_image(self, image: Image) -> Image:
        """
        Independent copy, for callers that need the original after an in-place transform.
        """
        return self.image_repository.copy(image)

    def get_image_dimensions(self, img: Image) -> Tuple[int, int]:
        """Return (width, height)."""
        return self.image_repository.retrieve_image_dimensions(img)
