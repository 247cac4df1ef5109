from pathlib import Path
from typing import Union, Iterable, List, Iterator
import logging

import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from ..config import IMAGE_EXTENSIONS
from ..errors import DecodeError
from ..models.image import Image

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O for Image entities.
    """
    def __init__(self, exts: Iterable[str] = IMAGE_EXTENSIONS):
        self.VALID_EXTS = set(exts)

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        """Decode any Pillow-readable file (first frame) into RGBA pixels."""
        path = Path(path)
        try:
            with PILImage.open(path) as pil_img:
                arr = np.array(pil_img.convert("RGBA"), dtype=np.uint8)
        except (UnidentifiedImageError, OSError) as err:
            raise DecodeError(f"Image not found or unreadable: {path} ({err})") from err

        return Image(pixels=np.ascontiguousarray(arr), path=path)

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ValueError("Image has no destination path")
        PILImage.fromarray(image.pixels).save(image.path, format="PNG")

    @staticmethod
    def set_pixels(image: Image, new_pixels: np.ndarray) -> None:
        image.pixels = np.ascontiguousarray(new_pixels, dtype=np.uint8)

    def iter_dir(
        self,
        folder: Union[str, Path],
        *,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Path]:
        """
        Yield candidate image paths directly inside *folder*, in name order.
        Extensions match case-sensitively; subdirectories are not entered.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = set(exts or self.VALID_EXTS)

        for p in sorted(folder.iterdir()):
            if p.suffix not in allowed:
                logger.debug(f"Skipping due to extension: {p}")
                continue
            if not p.is_file():
                logger.debug(f"Skipping because not file: {p}")
                continue
            yield p

    def list_dir(self, folder: Union[str, Path], *, exts=None) -> List[Path]:
        return list(self.iter_dir(folder, exts=exts))
