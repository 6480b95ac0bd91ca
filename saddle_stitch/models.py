"""
Data models for the booklet maker.

This module defines typed dataclasses for imposed pages, sheet placements
and export options. Value records are frozen so a plan or layout can be
shared freely once computed.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, List, Optional, Tuple

from .config import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_PAGE_FORMAT,
    PAGE_FORMATS,
)
from .exceptions import MalformedAssetError


class Orientation(Enum):
    """Page orientation."""
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class LengthUnit(Enum):
    """Unit used for page dimensions and placement rectangles."""
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    INCH = "in"
    POINT = "pt"


class HalfIndex(IntEnum):
    """Half of a physical page an item is placed on."""
    LEFT = 0
    RIGHT = 1


@dataclass(frozen=True)
class PageItem:
    """
    One logical page of the booklet.

    ``content`` is an opaque reference to the image (a path for the
    built-in services) or None for a blank page. ``original_index`` is the
    zero-based position in the padded input and is only used for display.
    """
    content: Any
    original_index: int

    @property
    def is_blank(self) -> bool:
        return self.content is None

    @property
    def page_number(self) -> int:
        """1-indexed page number shown to users."""
        return self.original_index + 1


@dataclass(frozen=True)
class AssetSize:
    """Intrinsic pixel dimensions of an image asset."""
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise MalformedAssetError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class Rect:
    """Placement rectangle; origin is the page's top-left corner, y grows downwards."""
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class SheetHalf:
    """A page item positioned on one half of a physical page."""
    page_item: PageItem
    half_index: HalfIndex
    rect: Rect


@dataclass(frozen=True)
class PlacementFailure:
    """A half that could not be placed; the rest of the document is unaffected."""
    page_index: int
    half_index: HalfIndex
    page_item: PageItem
    reason: str

    def __str__(self):
        side = self.half_index.name.lower()
        return (f"Sheet {self.page_index + 1} ({side}): page {self.page_item.page_number} "
                f"skipped - {self.reason}")


@dataclass(frozen=True)
class PhysicalPage:
    """
    One printed page holding up to two placements.

    ``left_item`` and ``right_item`` are kept even when nothing was placed
    for them, so renderers can draw placeholders for blanks.
    """
    page_index: int
    left_item: PageItem
    right_item: Optional[PageItem]
    halves: Tuple[SheetHalf, ...] = ()

    def blank_halves(self) -> List[HalfIndex]:
        """Halves whose page item is a blank."""
        blanks = []
        if self.left_item.is_blank:
            blanks.append(HalfIndex.LEFT)
        if self.right_item is not None and self.right_item.is_blank:
            blanks.append(HalfIndex.RIGHT)
        return blanks


@dataclass
class LayoutResult:
    """Physical pages in print order plus any placements that were skipped."""
    page_width: float
    page_height: float
    pages: List[PhysicalPage] = field(default_factory=list)
    failures: List[PlacementFailure] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def placements(self) -> List[SheetHalf]:
        """All placements across every page, in print order."""
        return [half for page in self.pages for half in page.halves]


@dataclass
class ExportOptions:
    """
    Configuration for booklet export.

    These options control the printed page and where the document is saved.
    """
    page_format: str = DEFAULT_PAGE_FORMAT
    orientation: Orientation = Orientation.LANDSCAPE
    unit: LengthUnit = LengthUnit.MILLIMETER
    output_name: str = DEFAULT_OUTPUT_NAME
    output_folder: str = ""
    mark_blanks: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        """Validate options."""
        if self.page_format not in PAGE_FORMATS:
            raise ValueError(
                f"page_format must be one of {', '.join(PAGE_FORMATS)}, got '{self.page_format}'"
            )
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        if not self.output_name:
            raise ValueError("output_name cannot be empty")


@dataclass
class ValidationResult:
    """
    Result of validation checks.

    Contains validation status, errors, and warnings that can be
    displayed to the user.
    """
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_issues(self) -> bool:
        """Check if there are any errors or warnings."""
        return len(self.errors) > 0 or len(self.warnings) > 0

    def get_summary(self) -> str:
        """Get a human-readable summary of validation results."""
        if self.is_valid and not self.warnings:
            return "Validation passed with no issues"

        parts = []
        if self.errors:
            parts.append(f"{len(self.errors)} error(s)")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warning(s)")

        return ", ".join(parts)

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, {self.get_summary()})"
