from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: RGBA pixels (+ optional path for bookkeeping).
    No Pillow / OpenCV logic outside the repository and filter services.
    """
    pixels: np.ndarray # Shape (H, W, 4), dtype uint8, RGBA order, C-contiguous.
    path: Path | None = None # Source or destination of the image.

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def clone(self) -> "Image":
        """Deep copy; the clone owns independent pixel data."""
        return Image(pixels=self.pixels.copy(), path=self.path)
