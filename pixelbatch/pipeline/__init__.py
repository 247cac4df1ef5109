from .process_image import process_file
from .batch import BatchResult, run_batch

__all__ = ["process_file", "run_batch", "BatchResult"]
