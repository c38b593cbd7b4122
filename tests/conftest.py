import os
import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.image import Image


SCENARIO_PIXELS = np.array(
    [
        [[10, 20, 30], [0, 0, 0]],
        [[255, 255, 255], [128, 128, 128]],
    ],
    dtype=np.uint8,
)

# Columns (1,1,1), (0,1,0), (1,0,1) laid out as rows
SCENARIO_MATRIX = [
    [1.0, 0.0, 1.0],
    [1.0, 1.0, 0.0],
    [1.0, 0.0, 1.0],
]


@pytest.fixture
def scenario_image() -> Image:
    return Image(pixels=SCENARIO_PIXELS.copy())


@pytest.fixture
def random_image() -> Image:
    rng = np.random.default_rng(1234)
    return Image(pixels=rng.integers(0, 256, size=(6, 9, 3), dtype=np.uint8))


@pytest.fixture
def png_file(tmp_path) -> Path:
    """Lossless on-disk copy of the scenario image."""
    path = tmp_path / "input.png"
    PILImage.fromarray(SCENARIO_PIXELS).save(path)
    return path
