from __future__ import annotations

from typing import Iterable
import logging

import numpy as np

from ..config import CROP_MARGIN
from ..models.image import Image
from .image_service import ImageService

logger = logging.getLogger(__name__)


class Compositor:
    """
    Layers highlight results back onto the original image.

    • Blue is layered first, red last, so red wins where both are opaque.
    • Layers sit at the origin and are clipped to the base.
    • The result is trimmed by CROP_MARGIN on the right.
    """

    def __init__(self, margin: int = CROP_MARGIN, image_service: ImageService | None = None):
        self.margin = margin
        self.image_service = image_service or ImageService()

    @staticmethod
    def _compose(base: np.ndarray, layer: np.ndarray, x: int = 0, y: int = 0) -> np.ndarray:
        """
        Source-over alpha blend of *layer* onto *base* at (x, y).
        Returns a new RGBA uint8 array the size of *base*.
        """
        out = base.copy()
        h = min(layer.shape[0], base.shape[0] - y)
        w = min(layer.shape[1], base.shape[1] - x)
        if h <= 0 or w <= 0:
            return out

        src = layer[:h, :w].astype("float32") / 255.0
        dst = out[y:y + h, x:x + w].astype("float32") / 255.0
        src_a = src[:, :, 3:4]
        dst_a = dst[:, :, 3:4]

        out_a = src_a + dst_a * (1.0 - src_a)
        safe_a = np.where(out_a > 0, out_a, 1.0)
        out_rgb = (src[:, :, :3] * src_a + dst[:, :, :3] * dst_a * (1.0 - src_a)) / safe_a

        blended = np.concatenate([out_rgb, out_a], axis=2)
        blended = np.where(src_a > 0, blended, dst)
        out[y:y + h, x:x + w] = np.clip(np.rint(blended * 255.0), 0, 255).astype("uint8")
        return out

    # --------------------------------------------------------------
    def layer(self, base: Image, layers: Iterable[Image]) -> Image:
        out = base.clone()
        for lyr in layers:
            self.image_service.update_pixels(out, self._compose(out.pixels, lyr.pixels, 0, 0))
        return out

    def compose(self, original: Image, blue: Image, red: Image) -> Image:
        out = self.layer(original, [blue, red])
        self.image_service.trim_horizontal(out, left=0, right=self.margin)
        logger.debug(f"Composite is {out.width}x{out.height}")
        return out
