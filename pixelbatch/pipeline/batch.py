"""
Folder-level batch: one independent unit of work per image file,
fanned out over a process pool. Completion (and log) order between
files is not defined.
"""
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List
import logging

from tqdm import tqdm

from ..config import MAX_WORKERS, OUTPUT_DIR, SHOW_PROGRESS, configure_logging
from ..errors import DecodeError
from ..services.image_service import ImageService
from .process_image import process_file

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """
    Outcome of one batch run.
    """
    processed: List[str] = field(default_factory=list)        # input file names
    failed: Dict[str, str] = field(default_factory=dict)      # input file name → error
    outputs: List[Path] = field(default_factory=list)         # every written file


def _record(result: BatchResult, path: Path, job: Callable[[], List[Path]]) -> None:
    try:
        written = job()
    except DecodeError as err:
        logger.error(f"> Could not decode '{path.name}': {err}")
        result.failed[path.name] = str(err)
    except Exception as err:
        logger.error(f"> Failed to process '{path.name}': {err}")
        result.failed[path.name] = str(err)
    else:
        result.processed.append(path.name)
        result.outputs.extend(written)


def run_batch(
    folder: str | Path,
    output_dir: str | Path = OUTPUT_DIR,
    *,
    max_workers: int = MAX_WORKERS,
    image_service: ImageService | None = None,
    show_progress: bool = SHOW_PROGRESS,
) -> BatchResult:
    """
    Process every supported image directly inside *folder*.

    A file that fails to decode or write is logged and skipped; the
    rest of the batch carries on. max_workers == 1 runs in-process.
    """
    image_service = image_service or ImageService()
    folder = Path(folder)
    output_dir = Path(output_dir).resolve()
    logger.info(f"Loading folder {folder}. . .")

    files = image_service.list_images(folder)
    result = BatchResult()
    if not files:
        logger.info("No supported images found.")
        return result
    output_dir.mkdir(parents=True, exist_ok=True)

    if max_workers <= 1:
        for p in tqdm(files, desc="images", ncols=70, disable=not show_progress):
            _record(result, p, lambda: process_file(p, output_dir))
    else:
        workers = min(max_workers, len(files))
        with ProcessPoolExecutor(max_workers=workers, initializer=configure_logging) as pool:
            futures = {pool.submit(process_file, p, output_dir): p for p in files}
            for fut in tqdm(as_completed(futures), total=len(futures),
                            desc="images", ncols=70, disable=not show_progress):
                _record(result, futures[fut], fut.result)

    logger.info(f"Finished: {len(result.processed)} processed, {len(result.failed)} failed.")
    return result
