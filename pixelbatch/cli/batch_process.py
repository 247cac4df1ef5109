"""
pixelbatch <folder>

Runs every filter over the images directly inside <folder> and writes
the results to ./output.
"""
import os
import sys
from pathlib import Path
from typing import List, Optional

from ..config import OUTPUT_DIR, configure_logging
from ..errors import ArgumentError, PathError
from ..pipeline.batch import run_batch


def parse_folder(argv: List[str]) -> Path:
    """Validate the positional folder argument."""
    if not argv:
        raise ArgumentError("No folder name found; check arguments.")

    folder = Path(argv[0])
    if not folder.is_dir() or not os.access(folder, os.R_OK | os.X_OK):
        raise PathError("Folder not found or could not be read.")
    return folder


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    # --- Centralized Logging Configuration ---
    configure_logging()

    try:
        folder = parse_folder(argv)
    except (ArgumentError, PathError) as err:
        print("Error loading from folder.")
        print(err)
        return 1

    run_batch(folder, OUTPUT_DIR)
    return 0


if __name__ == "__main__":
    sys.exit(main())
