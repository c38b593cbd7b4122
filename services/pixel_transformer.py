from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union
import logging

import numpy as np

from models.colour_matrix import ColourMatrix
from models.image import Image

logger = logging.getLogger(__name__)

# Channels wrap around this modulus, so results land in [0, 254].
CHANNEL_MODULUS = 255

MatrixLike = Union[ColourMatrix, Sequence[Sequence[float]]]


def _as_colour_matrix(matrix: MatrixLike) -> ColourMatrix:
    return matrix if isinstance(matrix, ColourMatrix) else ColourMatrix(matrix)


class PixelTransformer:
    """
    Treats every pixel's (R, G, B) as a vector and applies a 3x3 linear map to it.

    Output channel ``i`` is the dot product of the colour vector with column
    ``i`` of the matrix (not row ``i``). Each raw result is truncated toward
    zero, made non-negative and reduced modulo 255, so a channel never comes
    out as 255. Opacity, when present, is left alone.

    Construction only validates the matrix; pixels are touched by
    :meth:`transform`, which mutates the image in place.
    """

    def __init__(self, matrix: MatrixLike):
        self.matrix = _as_colour_matrix(matrix)
        self.col_r, self.col_g, self.col_b = self.matrix.columns()
        self._image: Optional[Image] = None

    # ─── Public API ────────────────────────────────────────────────
    def transform(self, image: Image) -> Image:
        """
        Overwrite the RGB channels of every pixel of *image* and return the same object.

        ``image.pixels`` must be writable; a read-only buffer (e.g. ``np.asarray``
        over a PIL image) is rejected before any channel is touched.
        """
        pixels = image.pixels
        if not pixels.flags["WRITEABLE"]:
            raise ValueError(
                "Image pixels are read-only; pass a writable array (e.g. np.array(...) or a copy)"
            )
        rgb = pixels[..., :3].astype(np.float64)

        for i, col in enumerate((self.col_r, self.col_g, self.col_b)):
            out = self._dot(rgb, col)
            # Every pixel was read into ``rgb`` above, so writing channel i
            # cannot feed into channel i+1 or into another pixel.
            pixels[..., i] = self._wrap(out)

        self._image = image
        logger.debug(
            f"Transformed {image.width}x{image.height} image with columns "
            f"{self.col_r}, {self.col_g}, {self.col_b}"
        )
        return image

    def transform_pixel(self, rgb: Sequence[float]) -> Tuple[int, int, int]:
        """
        Apply the transformation to a single colour vector.
        """
        v = np.asarray(rgb[:3], dtype=np.float64)
        return tuple(
            int(self._wrap(self._dot(v, col)))
            for col in (self.col_r, self.col_g, self.col_b)
        )

    def get_image(self) -> Optional[Image]:
        """Return the image last passed to :meth:`transform`."""
        return self._image

    # ─── Internal helpers ──────────────────────────────────────────
    @staticmethod
    def _dot(v: np.ndarray, col) -> np.ndarray:
        # Summed left to right so vectorised and per-pixel results agree bit for bit
        with np.errstate(over="ignore", invalid="ignore"):
            return (v[..., 0] * col[0]) + (v[..., 1] * col[1]) + (v[..., 2] * col[2])

    @staticmethod
    def _wrap(out: np.ndarray) -> np.ndarray:
        """abs(truncate(out)) mod 255, computed in float so no magnitude overflows."""
        with np.errstate(invalid="ignore", over="ignore"):
            wrapped = np.fmod(np.abs(np.trunc(out)), CHANNEL_MODULUS)
        # Products that overflowed to inf have no defined remainder
        wrapped = np.nan_to_num(wrapped, nan=0.0, posinf=0.0, neginf=0.0)
        return wrapped.astype(np.uint8)


def transform(image: Image, matrix: MatrixLike) -> Image:
    """Apply *matrix* to every pixel of *image* in place and return *image*."""
    return PixelTransformer(matrix).transform(image)
