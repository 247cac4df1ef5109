class PixelBatchError(Exception):
    """Base class for every error raised by pixelbatch."""


class ArgumentError(PixelBatchError):
    """No input folder was given on the command line."""


class PathError(PixelBatchError):
    """The input folder does not exist or cannot be read."""


class DecodeError(PixelBatchError):
    """A single input file could not be decoded as an image."""


class CropError(PixelBatchError, ValueError):
    """A crop would leave an empty image."""
