"""
Single-image pipeline: decode → six filters on independent clones →
red/blue composite → one PNG per result.
"""
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List, Tuple
import logging

from ..config import FILTER_WORKERS, OUTPUT_DIR, OUTPUT_EXT, OUTPUT_SUFFIXES
from ..models.highlight_color import HighlightColor
from ..models.image import Image
from ..models.kernel import EDGE_DETECT_KERNEL, SHARPEN_KERNEL
from ..services.composite_service import Compositor
from ..services.convolution_service import ConvolutionFilter
from ..services.highlight_service import ChannelHighlighter
from ..services.horror_service import HorrorFilter
from ..services.image_service import ImageService
from ..services.neighbor_predicate import NeighborPredicate

logger = logging.getLogger(__name__)

Stage = Tuple[str, Callable[[Image], Image]]


def build_stages(predicate: NeighborPredicate, image_service: ImageService) -> Dict[str, Stage]:
    """Output key → (log label, filter) for every per-clone filter."""
    return {
        "edge_detect": ("Edge detection image", ConvolutionFilter(EDGE_DETECT_KERNEL).apply),
        "sharpen": ("Sharpen image", ConvolutionFilter(SHARPEN_KERNEL).apply),
        "horror": ("Horror Filter version of image", HorrorFilter(predicate).apply),
        "red": ("Red version of image",
                ChannelHighlighter(HighlightColor.RED, predicate, image_service).apply),
        "green": ("Green version of image",
                  ChannelHighlighter(HighlightColor.GREEN, predicate, image_service).apply),
        "blue": ("Blue version of image",
                 ChannelHighlighter(HighlightColor.BLUE, predicate, image_service).apply),
    }


def output_path(output_dir: Path, name: str, key: str) -> Path:
    return output_dir / f"{name}-{OUTPUT_SUFFIXES[key]}{OUTPUT_EXT}"


def process_file(
    path: str | Path,
    output_dir: str | Path = OUTPUT_DIR,
    *,
    image_service: ImageService | None = None,
    compositor: Compositor | None = None,
    filter_workers: int = FILTER_WORKERS,
) -> List[Path]:
    """
    Run every filter on one input file and write its seven outputs.

    The filters run concurrently, each on its own clone of the decoded
    image. The composite waits for the red and blue results.
    Returns the written paths; raises on decode or write failure.
    """
    image_service = image_service or ImageService()
    compositor = compositor or Compositor(image_service=image_service)
    path = Path(path)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    name = path.stem

    logger.info(f"'{path.name}' found.  Processing image...")
    image = image_service.load(path)
    logger.info(f"> Image is {image.width}x{image.height}.")

    stages = build_stages(NeighborPredicate(), image_service)

    def run_stage(key: str, label: str, apply: Callable[[Image], Image]) -> Image:
        result = apply(image.clone())
        written = image_service.save(result, output_path(output_dir, name, key))
        logger.info(f"> {label} saved as <{written}>.")
        return result

    with ThreadPoolExecutor(max_workers=max(1, filter_workers)) as pool:
        futures = {key: pool.submit(run_stage, key, label, apply)
                   for key, (label, apply) in stages.items()}

        # join: the composite needs both highlight layers
        blue = futures["blue"].result()
        red = futures["red"].result()
        logger.info("> All images R G B filtered out.  Producing composite images...")

        composite = compositor.compose(image, blue=blue, red=red)
        composite_path = image_service.save(composite, output_path(output_dir, name, "composite"))
        logger.info(f"> Composite image produced as <{composite_path}>.")

        written = [futures[key].result().path for key in stages]

    written.append(composite_path)
    return written
