from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: RGB(A) pixels (+ optional path for bookkeeping).
    No OpenCV or Pillow logic outside the repository layer.
    """
    pixels: np.ndarray # Shape (H, W, 3) or (H, W, 4), dtype uint8, RGB(A) order.
    path: Path | None = None # Source of the image, or destination once set for saving.

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]
