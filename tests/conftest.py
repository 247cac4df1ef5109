"""Shared fixtures and image builders."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from pixelbatch.models.image import Image
from pixelbatch.services.neighbor_predicate import NeighborPredicate


def make_image(width, height, color=(0, 0, 0, 255)) -> Image:
    """Solid RGBA Image."""
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = color
    return Image(pixels=pixels)


def paint(img: Image, x0, y0, x1, y1, color) -> Image:
    """Fill the rectangle [x0, x1) x [y0, y1) in place."""
    img.pixels[y0:y1, x0:x1] = color
    return img


def write_png(path: Path, img: Image) -> Path:
    PILImage.fromarray(img.pixels).save(path, format="PNG")
    return path


@pytest.fixture
def predicate():
    return NeighborPredicate()


@pytest.fixture
def square_image():
    """100x100 black image with a 10x10 pure red square in the middle."""
    return paint(make_image(100, 100), 45, 45, 55, 55, (255, 0, 0, 255))


@pytest.fixture
def input_dir(tmp_path, square_image):
    folder = tmp_path / "input"
    folder.mkdir()
    write_png(folder / "square.png", square_image)
    return folder
