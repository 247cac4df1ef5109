from __future__ import annotations
from enum import Enum
from typing import Tuple

from ..config import CROP_MARGIN


class HighlightColor(Enum):
    """
    Pure highlight colours with the output suffix and the (left, right)
    crop trims applied to that channel's result.
    """
    RED = ((255, 0, 0), "red", (0, CROP_MARGIN))
    GREEN = ((0, 255, 0), "green", (0, CROP_MARGIN))
    BLUE = ((0, 0, 255), "blue", (CROP_MARGIN, 0))

    def __init__(self, rgb: Tuple[int, int, int], suffix: str, trims: Tuple[int, int]):
        self.rgb = rgb
        self.suffix = suffix
        self.trims = trims

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (*self.rgb, 255)
