from pathlib import Path
from typing import Union
import logging
import os
import signal

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

READ_TIMEOUT = int(os.getenv("IMAGE_READ_TIMEOUT", "5"))
OUTPUT_FORMAT = os.getenv("OUTPUT_IMAGE_FORMAT", "JPEG")
JPEG_QUALITY = int(os.getenv("JPEG_QUALITY", "75"))


class ImageRepository:
    """
    Handles file I/O and pixel updates for Image entities.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image):
        return img.width, img.height

    @staticmethod
    def load(path: Union[str, Path], rgb: bool = True, timeout: int = READ_TIMEOUT) -> Image:
        path = Path(path)

        # ─── timeout wrapper ──────────────────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        previous = signal.signal(signal.SIGALRM, _handler)
        signal.alarm(timeout)
        try:
            arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION)
        finally:
            signal.alarm(0)  # always disarm
            signal.signal(signal.SIGALRM, previous)
        # ──────────────────────────────────────────────────────────────────

        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        arr = arr_bgr[:, :, ::-1] if rgb else arr_bgr
        logger.debug(f"Loaded {path} ({arr.shape[1]}x{arr.shape[0]})")
        # Transforms write back into this buffer, so hand out an owned contiguous copy
        return Image(pixels=np.ascontiguousarray(arr), path=path)

    @staticmethod
    def save(image: Image, format: str = OUTPUT_FORMAT, quality: int = JPEG_QUALITY) -> Path:
        if image.path is None:
            raise ValueError("Image has no destination path")

        pil_img = PILImage.fromarray(np.ascontiguousarray(image.pixels))
        if format.upper() in ("JPEG", "JPG"):
            # JPEG carries no opacity
            pil_img = pil_img.convert("RGB")
            pil_img.save(image.path, format="JPEG", quality=quality)
        else:
            pil_img.save(image.path, format=format)

        logger.debug(f"Saved {image.path} as {format}")
        return Path(image.path)

    @staticmethod
    def copy(image: Image) -> Image:
        return Image(pixels=image.pixels.copy(), path=image.path)
