"""
Tests for the imposition module.
"""

import pytest
from saddle_stitch.imposition import (
    describe_plan,
    fold_order,
    move_item,
    pad_to_multiple_of_4,
    padding_needed,
    pair_sheets,
    plan,
)
from saddle_stitch.models import PageItem


class TestPadding:
    """Tests for padding to a multiple of 4."""

    @pytest.mark.parametrize("count,expected", [(0, 0), (1, 3), (2, 2), (3, 1), (4, 0), (5, 3), (8, 0)])
    def test_padding_needed(self, count, expected):
        assert padding_needed(count) == expected

    def test_pad_appends_blanks(self):
        """Test that five pages are padded to eight with trailing blanks."""
        padded = pad_to_multiple_of_4(['a', 'b', 'c', 'd', 'e'])

        assert len(padded) == 8
        assert padded[:5] == ['a', 'b', 'c', 'd', 'e']
        assert padded[5:] == [None, None, None]

    def test_pad_does_not_mutate_input(self):
        """Test that the caller's list is left untouched."""
        items = ['a', 'b', 'c']
        pad_to_multiple_of_4(items)

        assert items == ['a', 'b', 'c']

    def test_pad_empty(self):
        assert pad_to_multiple_of_4([]) == []


class TestFoldOrder:
    """Tests for fold order index arithmetic."""

    def test_four_pages(self):
        """Test the minimal booklet order."""
        assert fold_order(4) == [3, 0, 1, 2]

    def test_eight_pages(self):
        """Test that direction alternates on every fold group."""
        assert fold_order(8) == [7, 0, 1, 6, 5, 2, 3, 4]

    def test_zero_pages(self):
        assert fold_order(0) == []


class TestPlan:
    """Tests for the imposition planner."""

    def test_four_items(self):
        """Test that [A, B, C, D] is printed as D, A, B, C."""
        imposed = plan(['A', 'B', 'C', 'D'])

        assert [item.original_index for item in imposed] == [3, 0, 1, 2]
        assert [item.content for item in imposed] == ['D', 'A', 'B', 'C']

    def test_empty_input(self):
        """Test that no items yields an empty plan."""
        assert plan([]) == []

    def test_five_items_padded_to_eight(self):
        """Test that five items gain three blanks."""
        imposed = plan(['A', 'B', 'C', 'D', 'E'])

        assert len(imposed) == 8
        assert sorted(item.original_index for item in imposed) == list(range(8))
        blanks = [item.original_index for item in imposed if item.is_blank]
        assert sorted(blanks) == [5, 6, 7]

    @pytest.mark.parametrize("count", range(0, 21))
    def test_length_and_permutation(self, count):
        """Test that every padded index appears exactly once."""
        imposed = plan(list(range(count)))
        expected_len = count + (4 - count % 4) % 4

        assert len(imposed) == expected_len
        assert len(imposed) % 4 == 0
        assert sorted(item.original_index for item in imposed) == list(range(expected_len))

    def test_content_matches_original_index(self, sample_items):
        """Test that each item carries the content at its original position."""
        for item in plan(sample_items):
            assert item.content == sample_items[item.original_index]

    def test_returns_page_items(self):
        imposed = plan(['A'])

        assert all(isinstance(item, PageItem) for item in imposed)
        assert imposed[0] == PageItem(content=None, original_index=3)
        assert imposed[1] == PageItem(content='A', original_index=0)

    def test_blank_in_input_is_kept(self):
        """Test that caller-supplied blanks are treated like padding."""
        imposed = plan(['A', None, 'C', 'D'])

        assert [item.is_blank for item in imposed] == [False, False, True, False]

    def test_page_items_are_immutable(self):
        item = plan(['A', 'B', 'C', 'D'])[0]

        with pytest.raises(AttributeError):
            item.original_index = 0


class TestPairSheets:
    """Tests for grouping imposed pages into physical pages."""

    def test_pairs_are_consecutive(self, sample_items):
        imposed = plan(sample_items)
        pairs = pair_sheets(imposed)

        assert len(pairs) == 4
        assert [(left.original_index, right.original_index) for left, right in pairs] == [
            (7, 0), (1, 6), (5, 2), (3, 4)
        ]

    def test_odd_length_leaves_right_empty(self):
        items = [PageItem('A', 0), PageItem('B', 1), PageItem('C', 2)]

        pairs = pair_sheets(items)

        assert pairs[-1] == (items[2], None)

    def test_empty(self):
        assert pair_sheets([]) == []


class TestMoveItem:
    """Tests for reordering a page list."""

    def test_move_forward(self):
        assert move_item(['a', 'b', 'c', 'd'], 0, 2) == ['b', 'c', 'a', 'd']

    def test_move_backward(self):
        assert move_item(['a', 'b', 'c', 'd'], 3, 0) == ['d', 'a', 'b', 'c']

    def test_returns_new_list(self):
        items = ['a', 'b', 'c']
        moved = move_item(items, 0, 1)

        assert items == ['a', 'b', 'c']
        assert moved is not items

    def test_out_of_range(self):
        with pytest.raises(IndexError, match="from_index"):
            move_item(['a', 'b'], 2, 0)

        with pytest.raises(IndexError, match="to_index"):
            move_item(['a', 'b'], 0, -1)


class TestDescribePlan:
    """Tests for the preview description."""

    def test_labels_use_one_based_page_numbers(self):
        lines = describe_plan(plan(['A', 'B', 'C', 'D']))

        assert lines == ['Sheet 1: page 4 | page 1', 'Sheet 2: page 2 | page 3']

    def test_blank_label(self):
        lines = describe_plan(plan(['A', 'B', 'C']))

        assert lines[0] == 'Sheet 1: blank | page 1'

    def test_empty(self):
        assert describe_plan([]) == []
