"""
Metrics Service - Resolves intrinsic image sizes before layout.

Each image is measured independently on a thread pool, so one unreadable
file never affects the others.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Sequence

from PIL import Image

from ..config import DEFAULT_MAX_WORKERS
from ..exceptions import MalformedAssetError
from ..models import AssetSize, PageItem

logger = logging.getLogger(__name__)


@dataclass
class MetricsReport:
    """Sizes and errors keyed by PageItem.original_index."""
    sizes: Dict[int, AssetSize] = field(default_factory=dict)
    errors: Dict[int, MalformedAssetError] = field(default_factory=dict)


class MetricsService:
    """
    Measures image assets with Pillow.

    Images are fully decoded so truncated or corrupt files are caught
    here, before layout, rather than while the document is being drawn.
    """

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS):
        self.max_workers = max_workers

    def measure(self, content: Any) -> AssetSize:
        """
        Get the intrinsic pixel size of an image.

        Args:
            content: Path (or path string) to an image file

        Returns:
            AssetSize with the image's width and height

        Raises:
            MalformedAssetError: If the file can't be decoded as an image, is
                too large to decode safely, or has a zero dimension
        """
        try:
            with Image.open(Path(content)) as img:
                img.load()
                width, height = img.size
        except (OSError, ValueError, TypeError, SyntaxError, Image.DecompressionBombError) as e:
            raise MalformedAssetError(f"Cannot read image {content}: {e}") from e

        return AssetSize(width, height)

    def measure_all(self, imposed: Sequence[PageItem]) -> MetricsReport:
        """
        Measure every non-blank item of an imposed sequence.

        Args:
            imposed: PageItems from the planner

        Returns:
            MetricsReport with a size or an error for each non-blank item
        """
        report = MetricsReport()
        items = [item for item in imposed if not item.is_blank]
        if not items:
            return report

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {item.original_index: executor.submit(self.measure, item.content)
                       for item in items}

            for index, future in futures.items():
                try:
                    report.sizes[index] = future.result()
                except MalformedAssetError as e:
                    logger.warning("Page %d: %s", index + 1, e)
                    report.errors[index] = e

        logger.debug("Measured %d image(s), %d failed", len(report.sizes), len(report.errors))
        return report
