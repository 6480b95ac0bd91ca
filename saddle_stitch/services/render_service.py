"""
Render Service - Encodes a laid-out booklet as a PDF document.

Placements are computed in page units with a top-left origin; reportlab
works in points with a bottom-left origin, so every rectangle is converted
on the way out.
"""

import logging
from pathlib import Path

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..config import (
    DEFAULT_UNIT,
    PLACEHOLDER_LABEL,
    PLACEHOLDER_STROKE,
    PLACEHOLDER_TEXT,
    UNIT_TO_POINTS,
)
from ..exceptions import RenderError
from ..models import HalfIndex, LayoutResult, PhysicalPage, Rect

logger = logging.getLogger(__name__)


class DocumentRenderer:
    """
    Renders physical pages to a PDF with reportlab.

    Pages are added in print order, one per physical page, and the
    document is saved once after the last page.
    """

    def __init__(self, unit: str = DEFAULT_UNIT, mark_blanks: bool = False, title: str = ""):
        if unit not in UNIT_TO_POINTS:
            raise ValueError(f"Unknown unit '{unit}'")
        self.unit = unit
        self.scale = UNIT_TO_POINTS[unit]
        self.mark_blanks = mark_blanks
        self.title = title

    def to_points(self, rect: Rect, page_height: float) -> tuple:
        """
        Convert a top-left-origin rect in page units to reportlab coordinates.

        Returns:
            (x, y, width, height) in points, y measured from the page bottom
        """
        bottom_y = page_height - rect.bottom
        return (rect.x * self.scale, bottom_y * self.scale,
                rect.width * self.scale, rect.height * self.scale)

    def render(self, layout: LayoutResult, output_path: Path) -> Path:
        """
        Render every page of a layout and save the document.

        Args:
            layout: LayoutResult from the layout engine
            output_path: Destination PDF path

        Returns:
            Path to the saved PDF

        Raises:
            RenderError: If any page can't be drawn or the file can't be written
        """
        output_path = Path(output_path)
        page_size = (layout.page_width * self.scale, layout.page_height * self.scale)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            c = canvas.Canvas(str(output_path), pagesize=page_size)
            if self.title:
                c.setTitle(self.title)

            for page in layout.pages:
                self._draw_page(c, page, layout)
                c.showPage()

            c.save()

        except Exception as e:
            raise RenderError(f"Failed to render {output_path.name}: {e}") from e

        logger.info("Rendered %d page(s) to %s", layout.page_count, output_path)
        return output_path

    def _draw_page(self, c: canvas.Canvas, page: PhysicalPage, layout: LayoutResult):
        for half in page.halves:
            x, y, width, height = self.to_points(half.rect, layout.page_height)
            c.drawImage(ImageReader(str(half.page_item.content)), x, y,
                        width=width, height=height, mask='auto')

        if self.mark_blanks:
            for half_index in page.blank_halves():
                self._draw_placeholder(c, half_index, layout)

    def _draw_placeholder(self, c: canvas.Canvas, half_index: HalfIndex, layout: LayoutResult):
        half_width = layout.page_width / 2 * self.scale
        height = layout.page_height * self.scale
        margin = min(half_width, height) * 0.05
        x = half_width * int(half_index)

        c.saveState()
        c.setStrokeColorRGB(*PLACEHOLDER_STROKE)
        c.setDash(4, 4)
        c.rect(x + margin, margin, half_width - 2 * margin, height - 2 * margin, stroke=1, fill=0)
        c.setFillColorRGB(*PLACEHOLDER_TEXT)
        c.setFont('Helvetica', 12)
        c.drawCentredString(x + half_width / 2, height / 2, PLACEHOLDER_LABEL)
        c.restoreState()
