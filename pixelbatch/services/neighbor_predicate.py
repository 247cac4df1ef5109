"""
Colourfulness and "surrounded" tests shared by the horror and highlight filters.

Offsets are flat byte offsets into the row-major RGBA buffer, so the
west neighbour of a pixel in column 0 is the last pixel of the previous
row (and symmetrically for east). A neighbour offset outside the buffer
counts as "not colored".

Only radius 1 is used by the filters. For radius > 1 the vertical
neighbours sit at ``±row + radius`` bytes, which is neither pixel
aligned nor straight above/below; that branch is kept as-is and its
output is unverified.
"""
from typing import Sequence, Tuple

import numpy as np

from ..config import COLOR_THRESHOLD
from ..models.image import Image


class NeighborPredicate:

    def __init__(self, threshold: int = COLOR_THRESHOLD):
        self.threshold = threshold

    # ─── Scalar API ────────────────────────────────────────────────
    def is_colored(self, pixel: Sequence[int]) -> bool:
        """True if any of R, G, B is strictly above the threshold."""
        t = self.threshold
        return pixel[0] > t or pixel[1] > t or pixel[2] > t

    def is_colored_at(self, data: Sequence[int], offset: int, limit: int) -> bool:
        if offset < 0 or offset + 3 > limit:
            return False
        t = self.threshold
        return data[offset] > t or data[offset + 1] > t or data[offset + 2] > t

    @staticmethod
    def neighbor_offsets(width: int, radius: int) -> Tuple[int, int, int, int]:
        """(east, west, north, south) byte deltas for *radius*."""
        row = width * 4
        if radius == 1:
            return 4, -4, -row, row
        return 4 * radius, -4 * radius, -row + radius, row + radius

    def is_surrounded(self, data: Sequence[int], width: int, height: int,
                      offset: int, radius: int = 1) -> bool:
        """
        Radius 1: at least 2 of the 4 axis neighbours are colored.
        Radius r > 1: at least 2 of the 4 radius-r neighbours are colored
        AND the pixel is surrounded at radius r - 1.
        """
        if radius < 1:
            raise ValueError(f"radius must be >= 1, got {radius}")

        limit = width * height * 4
        count = 0
        for delta in self.neighbor_offsets(width, radius):
            if self.is_colored_at(data, offset + delta, limit):
                count += 1

        if radius == 1:
            return count >= 2
        return count >= 2 and self.is_surrounded(data, width, height, offset, radius - 1)

    # ─── Vectorised API (whole image, evaluated on a snapshot) ─────
    def colored_mask(self, img: Image) -> np.ndarray:
        """(H, W) bool mask of colored pixels."""
        return (img.pixels[:, :, :3] > self.threshold).any(axis=2)

    def surrounded_mask(self, img: Image, radius: int = 1) -> np.ndarray:
        """(H, W) bool mask, pixel for pixel equal to is_surrounded()."""
        if radius < 1:
            raise ValueError(f"radius must be >= 1, got {radius}")

        flat = img.pixels.reshape(-1)
        limit = flat.size
        starts = np.arange(0, limit, 4)

        # colored_bytes[o]: one of the 3 bytes starting at offset o is hot
        hot = flat > self.threshold
        colored_bytes = hot[:-2] | hot[1:-1] | hot[2:]

        mask = self._surrounded_flat(colored_bytes, starts, img.width, limit, radius)
        return mask.reshape(img.height, img.width)

    def _surrounded_flat(self, colored_bytes: np.ndarray, starts: np.ndarray,
                         width: int, limit: int, radius: int) -> np.ndarray:
        count = np.zeros(starts.shape, dtype=np.int8)
        for delta in self.neighbor_offsets(width, radius):
            offsets = starts + delta
            valid = (offsets >= 0) & (offsets + 3 <= limit)
            hits = np.zeros(starts.shape, dtype=bool)
            hits[valid] = colored_bytes[offsets[valid]]
            count += hits

        surrounded = count >= 2
        if radius == 1:
            return surrounded
        return surrounded & self._surrounded_flat(colored_bytes, starts, width, limit, radius - 1)
