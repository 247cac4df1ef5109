from .image_service import ImageService
from .neighbor_predicate import NeighborPredicate
from .convolution_service import ConvolutionFilter
from .horror_service import HorrorFilter
from .highlight_service import ChannelHighlighter
from .composite_service import Compositor

__all__ = [
    "ImageService",
    "NeighborPredicate",
    "ConvolutionFilter",
    "HorrorFilter",
    "ChannelHighlighter",
    "Compositor",
]
