"""
Central configuration for pixelbatch.

Fixed filter constants live here as named values so every filter takes
them from a single place. Ambient runtime settings (worker counts, log
level, progress bar) come from the environment, optionally via a .env file.
"""
import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# ─── Fixed filter constants ──────────────────────────────────────────
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif")
OUTPUT_DIR = "output"
OUTPUT_EXT = ".png"

CROP_MARGIN = 50        # px trimmed by the highlight and composite crops
COLOR_THRESHOLD = 100   # a channel strictly above this makes a pixel "colored"
HORROR_CEILING = 100    # upper bound of every channel written by the horror filter

OUTPUT_SUFFIXES = {
    "edge_detect": "ed",
    "sharpen": "sharpen",
    "horror": "horror",
    "red": "red",
    "green": "green",
    "blue": "blue",
    "composite": "composite",
}

# ─── Runtime settings ────────────────────────────────────────────────
MAX_WORKERS = int(os.getenv("PIXELBATCH_MAX_WORKERS", "0")) or os.cpu_count() or 1
FILTER_WORKERS = int(os.getenv("PIXELBATCH_FILTER_WORKERS", "6"))
LOG_LEVEL = os.getenv("PIXELBATCH_LOG_LEVEL", "INFO").upper()
SHOW_PROGRESS = os.getenv("PIXELBATCH_PROGRESS", "0") == "1"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Console logging as "[HH:MM] message" on stdout.
    Also used as the process-pool initializer so workers log the same way.
    """
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(message)s",
        datefmt="%H:%M",
        stream=sys.stdout,
    )
