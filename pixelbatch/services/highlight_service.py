from __future__ import annotations

import logging

import numpy as np

from ..models.highlight_color import HighlightColor
from ..models.image import Image
from .image_service import ImageService
from .neighbor_predicate import NeighborPredicate

logger = logging.getLogger(__name__)


class ChannelHighlighter:
    """
    Recolours objects of interest in one pure colour.

    • colored AND surrounded  →  opaque highlight colour
    • anything else           →  transparent black
    Both tests run on the unmodified clone, then the result is trimmed
    by the colour's (left, right) margins.
    """

    _TRANSPARENT = (0, 0, 0, 0)

    def __init__(self,
                 color: HighlightColor,
                 predicate: NeighborPredicate | None = None,
                 image_service: ImageService | None = None):
        self.color = color
        self.predicate = predicate or NeighborPredicate()
        self.image_service = image_service or ImageService()

    def apply(self, img: Image) -> Image:
        out = img.clone()
        keep = self.predicate.colored_mask(out) & self.predicate.surrounded_mask(out, 1)

        new_pixels = np.empty_like(out.pixels)
        new_pixels[...] = self._TRANSPARENT
        new_pixels[keep] = self.color.rgba
        self.image_service.update_pixels(out, new_pixels)

        left, right = self.color.trims
        self.image_service.trim_horizontal(out, left=left, right=right)
        logger.debug(f"{self.color.suffix} highlight kept {int(keep.sum())} pixels")
        return out
