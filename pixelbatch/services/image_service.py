from pathlib import Path
from typing import List, Union
import logging

import numpy as np

from ..errors import CropError
from ..models.image import Image
from ..repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class ImageService:
    """I/O and geometry helpers.  No filter logic here."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def list_images(self, folder: Union[str, Path]) -> List[Path]:
        """Paths of the supported image files directly inside *folder*."""
        return self.image_repository.list_dir(folder)

    def update_pixels(self, image: Image, new_pixels: np.ndarray) -> None:
        """
        Business-level method to replace the current image pixels.
        """
        self.image_repository.set_pixels(image, new_pixels)

    def save(self, image: Image, path: Union[str, Path] = None) -> Path:
        """
        Business-level method to save the image, optionally to a new path.
        """
        if path is not None:
            image.path = Path(path)
        self.image_repository.save(image)
        return image.path

    def crop_pixels(self, img: Image, bound_r, bound_l, bound_t, bound_b) -> np.ndarray:
        if bound_l >= bound_r or bound_t >= bound_b:
            img_h, img_w = img.pixels.shape[:2]
            width = bound_r - bound_l
            height = bound_b - bound_t
            logger.debug(f"Invalid crop bounds on {img_w}x{img_h}: "
                         f"left={bound_l}, right={bound_r}, top={bound_t}, bottom={bound_b}")
            raise CropError(f"Invalid crop bounds would create {width}x{height} image")

        return img.pixels[bound_t:bound_b, bound_l:bound_r].copy()

    def trim_horizontal(self, img: Image, left: int, right: int) -> None:
        """Crop *img* in place to columns [left, width - right)."""
        new_pixels = self.crop_pixels(img, bound_r=img.width - right, bound_l=left,
                                      bound_t=0, bound_b=img.height)
        self.update_pixels(img, new_pixels)
