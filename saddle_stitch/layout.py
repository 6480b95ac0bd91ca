"""
Sheet layout for imposed pages.

Places each imposed page on one half of a physical page, scaled to the
half's width with its aspect ratio preserved and centered vertically.
All computation is pure; intrinsic image sizes are resolved beforehand
and passed in as a mapping keyed by original page index.
"""

import logging
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import MalformedAssetError
from .imposition import pair_sheets
from .models import (
    AssetSize,
    HalfIndex,
    LayoutResult,
    PageItem,
    PhysicalPage,
    PlacementFailure,
    Rect,
    SheetHalf,
)

logger = logging.getLogger(__name__)

SizeLike = Union[AssetSize, Tuple[float, float]]


def _as_size(size: Optional[SizeLike]) -> AssetSize:
    if size is None:
        raise MalformedAssetError("intrinsic size unavailable")
    if isinstance(size, AssetSize):
        return size
    try:
        width, height = size
    except (TypeError, ValueError):
        raise MalformedAssetError(f"malformed intrinsic size {size!r}")
    return AssetSize(width, height)


def place_half(
    item: PageItem,
    half_index: HalfIndex,
    page_width: float,
    page_height: float,
    size: Optional[SizeLike]
) -> SheetHalf:
    """
    Compute the placement of one page on one half of a physical page.

    The image takes the full half width; its height follows from the
    aspect ratio. A tall image yields a negative y and overflows the page
    vertically rather than being clamped.

    Args:
        item: Page item to place (must not be blank)
        half_index: HalfIndex.LEFT or HalfIndex.RIGHT
        page_width: Physical page width
        page_height: Physical page height
        size: Intrinsic (width, height) of the image

    Returns:
        SheetHalf with the computed rectangle

    Raises:
        MalformedAssetError: If the size is missing or not positive

    Example:
        >>> half = place_half(PageItem('a.png', 0), HalfIndex.RIGHT, 300, 100, (200, 100))
        >>> half.rect
        Rect(x=150.0, y=12.5, width=150.0, height=75.0)
    """
    asset = _as_size(size)
    half_width = page_width / 2

    new_width = half_width
    new_height = new_width / asset.aspect_ratio
    y_position = (page_height - new_height) / 2
    x_position = 0.0 if half_index == HalfIndex.LEFT else half_width

    return SheetHalf(
        page_item=item,
        half_index=HalfIndex(half_index),
        rect=Rect(x=float(x_position), y=y_position, width=new_width, height=new_height)
    )


def layout_sheet(
    left_item: PageItem,
    right_item: Optional[PageItem],
    page_width: float,
    page_height: float,
    sizes: Mapping[int, SizeLike],
    page_index: int = 0,
    failures: Optional[List[PlacementFailure]] = None
) -> List[SheetHalf]:
    """
    Lay out one physical page from a pair of imposed items.

    Blank items produce no placement. An item whose size is missing or
    malformed is logged and skipped; when ``failures`` is given, a
    PlacementFailure is appended to it. The other half is still placed.

    Args:
        left_item: Item for the left half
        right_item: Item for the right half, or None
        page_width: Physical page width
        page_height: Physical page height
        sizes: Intrinsic sizes keyed by PageItem.original_index
        page_index: Zero-based physical page index, used in reports
        failures: Optional list collecting skipped placements

    Returns:
        Placements for this page (0, 1 or 2 entries), left before right
    """
    halves = []

    for half_index, item in ((HalfIndex.LEFT, left_item), (HalfIndex.RIGHT, right_item)):
        if item is None or item.is_blank:
            continue

        try:
            halves.append(place_half(item, half_index, page_width, page_height,
                                     sizes.get(item.original_index)))
        except MalformedAssetError as e:
            failure = PlacementFailure(page_index=page_index, half_index=half_index,
                                       page_item=item, reason=str(e))
            logger.warning("%s", failure)
            if failures is not None:
                failures.append(failure)

    return halves


def layout_document(
    imposed: Sequence[PageItem],
    page_width: float,
    page_height: float,
    sizes: Mapping[int, SizeLike]
) -> LayoutResult:
    """
    Lay out a whole imposed sequence, one physical page per consecutive pair.

    Physical page N holds sheet N of the plan. Skipped placements are
    collected in ``LayoutResult.failures`` and never stop the remaining
    pages.
    """
    result = LayoutResult(page_width=page_width, page_height=page_height)

    for page_index, (left, right) in enumerate(pair_sheets(imposed)):
        halves = layout_sheet(left, right, page_width, page_height, sizes,
                              page_index=page_index, failures=result.failures)
        result.pages.append(PhysicalPage(page_index=page_index, left_item=left,
                                         right_item=right, halves=tuple(halves)))

    logger.debug("Laid out %d page(s), %d placement(s), %d skipped",
                 result.page_count, len(result.placements()), len(result.failures))
    return result
