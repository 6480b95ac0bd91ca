"""
Booklet Service - High-level booklet generation operations.

This service coordinates planning, image measurement, layout and
rendering, and provides a single entry point for the CLI.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

from .. import imposition
from ..config import page_dimensions
from ..layout import layout_document
from ..models import ExportOptions, LayoutResult, PageItem
from ..validators import InputValidator
from .metrics_service import MetricsService
from .render_service import DocumentRenderer

logger = logging.getLogger(__name__)


@dataclass
class BookletResult:
    """Outcome of a booklet export."""
    output_path: Path
    page_count: int
    imposed: List[PageItem] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return len(self.failures) > 0


class BookletService:
    """
    High-level service for booklet operations.

    Runs the pipeline plan -> measure -> layout -> render. Individual
    images that can't be measured or placed are reported in the result;
    renderer failures propagate as RenderError.
    """

    def __init__(
        self,
        options: Optional[ExportOptions] = None,
        metrics_service: Optional[MetricsService] = None,
        renderer: Optional[DocumentRenderer] = None
    ):
        self.options = options or ExportOptions()
        self.metrics_service = metrics_service or MetricsService(self.options.max_workers)
        self.renderer = renderer or DocumentRenderer(
            unit=self.options.unit.value,
            mark_blanks=self.options.mark_blanks,
            title=Path(self.options.output_name).stem
        )

    @property
    def page_size(self):
        """Physical page (width, height) in the configured unit."""
        return page_dimensions(self.options.page_format,
                               self.options.orientation.value,
                               self.options.unit.value)

    def plan(self, items: Sequence[Any]) -> List[PageItem]:
        """Compute the imposition for items in reading order."""
        return imposition.plan(items)

    def preview(self, items: Sequence[Any], namer: Optional[Callable[[Any], str]] = None) -> List[str]:
        """
        Describe the print order sheet by sheet.

        Args:
            items: Page contents in reading order
            namer: Optional callable naming each item (e.g. its file name)

        Returns:
            One line per physical page, e.g. "Sheet 1: page 4 | page 1"
        """
        return imposition.describe_plan(self.plan(items), namer)

    def layout(self, imposed: Sequence[PageItem]) -> tuple:
        """
        Measure images and lay out every physical page.

        Returns:
            Tuple of (LayoutResult, list of failure messages)
        """
        report = self.metrics_service.measure_all(imposed)
        width, height = self.page_size
        result: LayoutResult = layout_document(imposed, width, height, report.sizes)

        for page_index, half_index, amount in InputValidator.check_overflow(result):
            logger.info("Sheet %d (%s): image overflows top and bottom by %.1f %s",
                        page_index + 1, half_index.name.lower(), amount, self.options.unit.value)

        messages = []
        for failure in result.failures:
            error = report.errors.get(failure.page_item.original_index)
            messages.append(f"{failure} ({error})" if error else str(failure))
        return result, messages

    def resolve_output_path(self, output_path: Optional[Path] = None) -> Path:
        """
        Determine where the document is written.

        An explicit path wins; otherwise output_name inside output_folder
        (or the current directory).
        """
        if output_path is not None:
            return Path(output_path)
        folder = Path(self.options.output_folder) if self.options.output_folder else Path.cwd()
        return folder / self.options.output_name

    def generate(
        self,
        items: Sequence[Any],
        output_path: Optional[Path] = None
    ) -> Optional[BookletResult]:
        """
        Generate a booklet PDF from items in reading order.

        Args:
            items: Image paths in reading order; None marks a blank page
            output_path: Optional destination (defaults from options)

        Returns:
            BookletResult, or None when there is nothing to render

        Raises:
            RenderError: If the document can't be rendered or saved
        """
        if not items:
            logger.info("No pages to render, skipping export")
            return None

        imposed = self.plan(items)
        logger.info("Imposed %d page(s) onto %d sheet(s)", len(imposed), len(imposed) // 2)

        layout, failures = self.layout(imposed)
        destination = self.renderer.render(layout, self.resolve_output_path(output_path))

        return BookletResult(
            output_path=destination,
            page_count=layout.page_count,
            imposed=imposed,
            failures=failures
        )
