"""
Saddle-stitch imposition planning.

Reorders logical pages into the order they are printed on physical sheets,
so that folding the stacked sheets in half yields the reading order.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from .models import PageItem

logger = logging.getLogger(__name__)

T = TypeVar('T')


def padding_needed(count: int) -> int:
    """Number of blank pages needed to reach a multiple of 4."""
    return (4 - count % 4) % 4


def pad_to_multiple_of_4(items: Sequence[Optional[T]]) -> List[Optional[T]]:
    """
    Return a copy of ``items`` with None appended up to a multiple of 4.

    Examples:
        [a, b, c, d, e] -> [a, b, c, d, e, None, None, None]
        [] -> []
    """
    padded = list(items)
    padded.extend([None] * padding_needed(len(padded)))
    return padded


def fold_order(count: int) -> List[int]:
    """
    Calculate the print order of page indices for a padded page count.

    Two cursors walk inwards from both ends of the booklet. Even fold
    groups emit (right, left) and odd groups emit (left, right), so the
    outermost sheet comes first and alternate sheets flip direction.

    Args:
        count: Padded page count (multiple of 4)

    Returns:
        List of zero-based page indices in print order

    Example:
        >>> fold_order(4)
        [3, 0, 1, 2]
    """
    order = []
    left = 0
    right = count - 1
    group_index = 0

    while left < right:
        if group_index % 2 == 0:
            order.extend((right, left))
        else:
            order.extend((left, right))
        left += 1
        right -= 1
        group_index += 1

    return order


def plan(items: Sequence[Optional[T]]) -> List[PageItem]:
    """
    Compute the saddle-stitch imposition for an ordered sequence of pages.

    Args:
        items: Page contents in reading order; None marks a blank page

    Returns:
        PageItems in print order. Length is always a multiple of 4 and
        every padded index appears exactly once. Empty input gives an
        empty plan.
    """
    padded = pad_to_multiple_of_4(items)
    imposed = [PageItem(content=padded[idx], original_index=idx)
               for idx in fold_order(len(padded))]

    logger.debug("Planned %d page(s) from %d input(s), %d blank(s) added",
                 len(imposed), len(items), len(padded) - len(items))
    return imposed


def pair_sheets(imposed: Sequence[PageItem]) -> List[Tuple[PageItem, Optional[PageItem]]]:
    """
    Group an imposed sequence into (left, right) pairs, one per physical page.

    The right item is None only if the sequence has odd length, which a
    plan never produces.
    """
    pairs = []
    for i in range(0, len(imposed), 2):
        right = imposed[i + 1] if i + 1 < len(imposed) else None
        pairs.append((imposed[i], right))
    return pairs


def move_item(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """
    Return a new list with the item at ``from_index`` moved to ``to_index``.

    The input is left untouched; reordering always produces a fresh
    snapshot for the planner.

    Raises:
        IndexError: If either index is out of range
    """
    count = len(items)
    for name, index in (('from_index', from_index), ('to_index', to_index)):
        if not 0 <= index < count:
            raise IndexError(f"{name} {index} out of range (0-{count - 1})")

    result = list(items)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return result


def _label(item: Optional[PageItem], namer: Optional[Callable[[Any], str]]) -> str:
    if item is None:
        return "-"
    if item.is_blank:
        return "blank"
    if namer is not None:
        return f"page {item.page_number} ({namer(item.content)})"
    return f"page {item.page_number}"


def describe_plan(
    imposed: Sequence[PageItem],
    namer: Optional[Callable[[Any], str]] = None
) -> List[str]:
    """
    Describe each physical page of a plan for preview.

    Args:
        imposed: PageItems from plan()
        namer: Optional callable giving a display name for an item's content

    Example:
        >>> describe_plan(plan(['a', 'b', 'c']))
        ['Sheet 1: blank | page 1', 'Sheet 2: page 2 | page 3']
        >>> describe_plan(plan(['a', 'b', 'c', 'd']), namer=str.upper)[0]
        'Sheet 1: page 4 (D) | page 1 (A)'
    """
    return [f"Sheet {sheet_num}: {_label(left, namer)} | {_label(right, namer)}"
            for sheet_num, (left, right) in enumerate(pair_sheets(imposed), start=1)]
