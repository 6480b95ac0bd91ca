"""
Centralized configuration and constants for the booklet maker.

Page formats, length units and rendering defaults live here so the CLI,
services and tests agree on a single source of truth.
"""

from typing import Dict, Set, Tuple

from reportlab.lib import pagesizes
from reportlab.lib.units import cm, inch, mm


# Page formats in points (72 points per inch) - (width, height) in portrait
PAGE_FORMATS: Dict[str, Tuple[float, float]] = {
    'a3': pagesizes.A3,
    'a4': pagesizes.A4,
    'a5': pagesizes.A5,
    'letter': pagesizes.LETTER,
    'legal': pagesizes.LEGAL,
    'tabloid': pagesizes.ELEVENSEVENTEEN,   # 11x17"
}

# Points per unit
UNIT_TO_POINTS: Dict[str, float] = {
    'pt': 1.0,
    'mm': mm,
    'cm': cm,
    'in': inch,
}

ORIENTATIONS = ('landscape', 'portrait')

DEFAULT_PAGE_FORMAT = 'a4'
DEFAULT_ORIENTATION = 'landscape'
DEFAULT_UNIT = 'mm'
DEFAULT_OUTPUT_NAME = 'saddle-stitch-book.pdf'
DEFAULT_MAX_WORKERS = 4

# Image inputs
IMAGE_EXTENSIONS: Set[str] = {'.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp', '.tif', '.tiff'}

# Booklets thicker than this are hard to fold and staple
LARGE_BOOKLET_PAGES = 64

# Blank placeholder styling (RGB floats for reportlab)
PLACEHOLDER_STROKE = (0.78, 0.78, 0.80)
PLACEHOLDER_TEXT = (0.42, 0.45, 0.50)
PLACEHOLDER_LABEL = 'blank'


def page_dimensions(page_format: str = DEFAULT_PAGE_FORMAT,
                    orientation: str = DEFAULT_ORIENTATION,
                    unit: str = DEFAULT_UNIT) -> Tuple[float, float]:
    """
    Get page (width, height) in the requested unit.

    Args:
        page_format: Key from PAGE_FORMATS (e.g., 'a4')
        orientation: 'landscape' or 'portrait'
        unit: Key from UNIT_TO_POINTS (e.g., 'mm')

    Returns:
        (width, height) tuple expressed in ``unit``

    Raises:
        ValueError: If any argument is not a known value

    Example:
        >>> w, h = page_dimensions('a4', 'landscape', 'mm')
        >>> round(w), round(h)
        (297, 210)
    """
    if page_format not in PAGE_FORMATS:
        raise ValueError(
            f"Unknown page format '{page_format}'. Must be one of: {', '.join(PAGE_FORMATS)}"
        )
    if orientation not in ORIENTATIONS:
        raise ValueError(f"Unknown orientation '{orientation}'. Must be 'landscape' or 'portrait'")
    if unit not in UNIT_TO_POINTS:
        raise ValueError(f"Unknown unit '{unit}'. Must be one of: {', '.join(UNIT_TO_POINTS)}")

    size = PAGE_FORMATS[page_format]
    if orientation == 'landscape':
        size = pagesizes.landscape(size)
    else:
        size = pagesizes.portrait(size)

    factor = UNIT_TO_POINTS[unit]
    return size[0] / factor, size[1] / factor
