from .image import Image
from .kernel import Kernel, EDGE_DETECT_KERNEL, SHARPEN_KERNEL
from .highlight_color import HighlightColor

__all__ = [
    "Image",
    "Kernel",
    "EDGE_DETECT_KERNEL",
    "SHARPEN_KERNEL",
    "HighlightColor",
]
