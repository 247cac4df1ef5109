import logging

import cv2
import numpy as np

from ..models.image import Image
from ..models.kernel import Kernel

logger = logging.getLogger(__name__)


class ConvolutionFilter:
    """
    Applies a fixed 3x3 kernel to the RGB channels of an Image.

    • Weighted sum over the neighbourhood, no divisor, clamped to 0‑255.
    • Kernel is applied as-is (correlation, no flip).
    • Borders are sampled clamp-to-edge.
    • Alpha is copied unchanged from the source.
    """

    def __init__(self, kernel: Kernel):
        self.kernel = kernel
        self._weights = kernel.as_array()

    def apply(self, img: Image) -> Image:
        rgb = img.pixels[:, :, :3].astype(np.float32)
        summed = cv2.filter2D(rgb, cv2.CV_32F, self._weights,
                              borderType=cv2.BORDER_REPLICATE)

        out = img.pixels.copy()
        out[:, :, :3] = np.clip(summed, 0, 255).astype(np.uint8)
        logger.debug(f"Applied {self.kernel.name} kernel to {img.width}x{img.height} image")
        return Image(pixels=out, path=img.path)
