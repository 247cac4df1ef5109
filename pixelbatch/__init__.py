"""
pixelbatch: fixed-filter batch processing for folders of raster images.
"""

__version__ = "1.0.0"
