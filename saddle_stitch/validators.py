"""
Input and option validators for booklet generation.

These validators run before anything is rendered and return
ValidationResult objects with messages suitable for showing to users.
"""

from pathlib import Path
from typing import List, Sequence, Tuple

from .config import (
    IMAGE_EXTENSIONS,
    LARGE_BOOKLET_PAGES,
    ORIENTATIONS,
    PAGE_FORMATS,
    UNIT_TO_POINTS,
)
from .imposition import padding_needed
from .models import HalfIndex, LayoutResult, ValidationResult


class InputValidator:
    """Validates booklet inputs and export settings."""

    @staticmethod
    def validate_images(paths: Sequence[Path]) -> ValidationResult:
        """
        Validate the image files selected for a booklet.

        Args:
            paths: Image file paths in reading order

        Returns:
            ValidationResult with any errors or warnings
        """
        result = ValidationResult(is_valid=True)

        if not paths:
            result.add_warning("No images selected, nothing will be rendered")
            return result

        for path in paths:
            path = Path(path)
            if not path.exists():
                result.add_error(f"Image not found: {path}")
            elif path.suffix.lower() not in IMAGE_EXTENSIONS:
                result.add_error(f"Unsupported image type '{path.suffix}': {path.name}")

        blanks = padding_needed(len(paths))
        if blanks:
            result.add_warning(
                f"{len(paths)} page(s) is not a multiple of 4, {blanks} blank page(s) will be added at the end"
            )

        if len(paths) > LARGE_BOOKLET_PAGES:
            result.add_warning(
                f"Large booklet ({len(paths)} pages) may be too thick to fold and staple"
            )

        return result

    @staticmethod
    def validate_export_options(
        page_format: str,
        orientation: str,
        unit: str
    ) -> ValidationResult:
        """
        Validate page setup values.

        Args:
            page_format: Page format name (e.g., 'a4')
            orientation: 'landscape' or 'portrait'
            unit: Length unit (e.g., 'mm')

        Returns:
            ValidationResult with any errors
        """
        result = ValidationResult(is_valid=True)

        if page_format not in PAGE_FORMATS:
            result.add_error(
                f"Invalid page format: '{page_format}'. Must be one of: {', '.join(PAGE_FORMATS)}"
            )
        if orientation not in ORIENTATIONS:
            result.add_error(f"Invalid orientation: '{orientation}'. Must be 'landscape' or 'portrait'")
        if unit not in UNIT_TO_POINTS:
            result.add_error(f"Invalid unit: '{unit}'. Must be one of: {', '.join(UNIT_TO_POINTS)}")

        return result

    @staticmethod
    def check_overflow(layout: LayoutResult) -> List[Tuple[int, HalfIndex, float]]:
        """
        Find placements that extend past the top and bottom of their page.

        Images taller than the half-page ratio are centered and left to
        overflow; this reports them so users can crop before printing.

        Returns:
            List of (page_index, half_index, overflow) tuples, where
            overflow is the amount cut off at each edge
        """
        results = []
        for page in layout.pages:
            for half in page.halves:
                if half.rect.y < 0:
                    results.append((page.page_index, half.half_index, -half.rect.y))
        return results
