from __future__ import annotations

from typing import Dict, Tuple
import logging

import numpy as np

from ..config import HORROR_CEILING
from ..models.image import Image
from .image_service import ImageService
from .neighbor_predicate import NeighborPredicate

logger = logging.getLogger(__name__)


class HorrorFilter:
    """
    Directional-mean smoothing that melts textures and keeps objects.

    Every surrounded pixel takes, per channel, the smallest of four
    3-sample means (north, east, south, west) and the ceiling, and
    becomes opaque. The scan runs in row-major order and mutates its
    clone in place, so later pixels see the already-filtered ones.

    The four means use fixed byte taps relative to the pixel; "south"
    and "west" are not geometric and must stay exactly as listed.
    A channel whose taps fall outside the buffer is written as 0.
    """

    def __init__(self,
                 predicate: NeighborPredicate | None = None,
                 ceiling: int = HORROR_CEILING):
        self.predicate = predicate or NeighborPredicate()
        self.ceiling = ceiling
        self.image_service = ImageService()

    @staticmethod
    def taps(width: int) -> Dict[str, Tuple[int, int, int]]:
        """Byte offsets of the three samples behind each directional mean."""
        row = width * 4
        return {
            "north": (-row - 4, -row, -row + 4),
            "east": (-row + 4, 4, row + 4),
            "south": (row - 4, -row, -row + 4),
            "west": (-row - 4, row, row + 4),
        }

    # ─── Public API ────────────────────────────────────────────────
    def apply(self, img: Image) -> Image:
        out = img.clone()
        # rewritten pixels can never be colored again when ceiling <= threshold
        if out.width >= 3 and self.ceiling <= self.predicate.threshold:
            new_pixels, changed = self._scan_blocks(out)
        else:
            new_pixels, changed = self._scan_pixels(out)

        self.image_service.update_pixels(out, new_pixels)
        logger.debug(f"Horror filter rewrote {changed} of {out.width * out.height} pixels")
        return out

    # ─── Pixel-by-pixel scan (any width / ceiling) ─────────────────
    def _scan_pixels(self, img: Image) -> Tuple[np.ndarray, int]:
        width, height = img.width, img.height
        data = bytearray(img.pixels.tobytes())
        limit = len(data)
        taps = tuple(self.taps(width).values())

        changed = 0
        for idx in range(0, limit, 4):
            if not self.predicate.is_surrounded(data, width, height, idx, 1):
                continue
            for channel in range(3):
                data[idx + channel] = self._channel_value(data, idx + channel, taps, limit)
            data[idx + 3] = 255
            changed += 1

        pixels = np.frombuffer(data, dtype=np.uint8).reshape(height, width, 4).copy()
        return pixels, changed

    def _channel_value(self, data: bytearray, base: int, taps, limit: int) -> int:
        means = []
        for offsets in taps:
            samples = [base + o for o in offsets]
            if any(s < 0 or s >= limit for s in samples):
                return 0
            means.append(sum(data[s] for s in samples) / 3)
        return int(min(*means, self.ceiling))

    # ─── Block scan (width >= 3, ceiling <= threshold) ─────────────
    def _scan_blocks(self, img: Image) -> Tuple[np.ndarray, int]:
        """
        Same result as _scan_pixels, in two passes.

        1. Which pixels get rewritten only depends on colored flags: a
           rewritten pixel is never colored, so the gate is a boolean
           recurrence over the flat pixel order.
        2. Pixel p reads finished values at p-w-1 .. p-w+1 and untouched
           originals at p+1, p+w-1 .. p+w+1, so any w-1 consecutive
           pixels can be computed together.
        """
        width, height = img.width, img.height
        n = width * height
        orig = img.pixels.reshape(n, 4)
        final = orig.copy()
        ahead = orig.astype(np.float64)

        gates = self._gates(self.predicate.colored_mask(img).reshape(-1), width)
        index = np.arange(n)
        # every tap lies in [p-w-1, p+w+1]
        in_bounds = (index >= width + 1) & (index <= n - width - 2)

        step = width - 1
        for start in range(0, n, step):
            hit = gates[start:start + step]
            if not hit.any():
                continue
            k = index[start:start + step][hit]
            ok = in_bounds[k]

            values = np.zeros((k.size, 3), dtype=np.uint8)
            if ok.any():
                values[ok] = self._block_values(final, ahead, k[ok], width)
            final[k, :3] = values
            final[k, 3] = 255

        return final.reshape(height, width, 4), int(gates.sum())

    @staticmethod
    def _gates(colored: np.ndarray, width: int) -> np.ndarray:
        n = colored.size
        ahead = np.zeros(n, dtype=np.int8)
        ahead[:-1] += colored[1:]
        ahead[:max(n - width, 0)] += colored[width:]

        co = colored.tolist()
        counts = ahead.tolist()
        gates = [False] * n
        for k in range(n):
            count = counts[k]
            if k >= 1 and co[k - 1] and not gates[k - 1]:
                count += 1
            if k >= width and co[k - width] and not gates[k - width]:
                count += 1
            gates[k] = count >= 2
        return np.array(gates, dtype=bool)

    def _block_values(self, final: np.ndarray, ahead: np.ndarray,
                      k: np.ndarray, width: int) -> np.ndarray:
        nw = final[k - width - 1, :3].astype(np.float64)
        n = final[k - width, :3].astype(np.float64)
        ne = final[k - width + 1, :3].astype(np.float64)
        e = ahead[k + 1, :3]
        sw = ahead[k + width - 1, :3]
        s = ahead[k + width, :3]
        se = ahead[k + width + 1, :3]

        north = (nw + n + ne) / 3
        east = (ne + e + se) / 3
        south = (sw + n + ne) / 3
        west = (nw + s + se) / 3
        low = np.minimum.reduce([north, east, south, west, np.full_like(north, self.ceiling)])
        return np.floor(low).astype(np.uint8)
