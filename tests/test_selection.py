"""Point, range and index-list selection"""
import pytest
from py_table import Span, Picks, wrap, empty, at, rows, columns, rows_columns, dimensions
from py_table import selection
from py_table.errors import PyTableTypeError


@pytest.fixture
def grid():
    # 3 rows x 4 columns
    return wrap([
        [0, 1, 2, 3],
        [10, 11, 12, 13],
        [20, 21, 22, 23],
    ])


class TestAt:

    def test_in_bounds(self, grid):
        assert at(grid, 1, 2) == 12
        assert grid.at(2, 3) == 23
        assert grid[0, 1] == 1

    @pytest.mark.parametrize("row,column", [(3, 0), (0, 4), (100, 100), (-4, 0), (0, -5)])
    def test_out_of_bounds_is_none(self, grid, row, column):
        assert at(grid, row, column) is None

    def test_negative_counts_from_end(self, grid):
        assert at(grid, -1, -1) == 23
        assert at(grid, -3, 0) == 0

    def test_empty_table(self):
        assert at(empty(), 0, 0) is None

    def test_bad_getitem_key(self, grid):
        with pytest.raises(PyTableTypeError):
            grid[0]


class TestRowsSpan:

    def test_inclusive(self, grid):
        assert rows(grid, Span(0, 1)) == [[0, 1, 2, 3], [10, 11, 12, 13]]

    def test_last_clamped(self, grid):
        assert rows(grid, Span(1, 99)) == [[10, 11, 12, 13], [20, 21, 22, 23]]

    def test_negative_last(self, grid):
        assert rows(grid, Span(1, -1)) == [[10, 11, 12, 13], [20, 21, 22, 23]]

    @pytest.mark.parametrize("span", [Span(2, 1), Span(3, 5), Span(-5, 1)])
    def test_empty_results(self, grid, span):
        result = rows(grid, span)
        assert len(result) == 0
        assert dimensions(result) == [0, 4]

    def test_range_is_coerced(self, grid):
        assert rows(grid, range(1, 3)) == rows(grid, Span(1, 2))


class TestRowsPicks:
    """Reorder-and-filter"""

    def test_order_follows_request_and_drops_out_of_range(self, grid):
        assert rows(grid, Picks([2, 0, 5])) == [[20, 21, 22, 23], [0, 1, 2, 3]]

    def test_list_is_coerced(self, grid):
        assert rows(grid, [2, 0, 5]) == rows(grid, Picks([2, 0, 5]))

    def test_duplicates_repeat(self, grid):
        assert rows(grid, [1, 1]) == [[10, 11, 12, 13], [10, 11, 12, 13]]

    def test_all_dropped(self, grid):
        result = rows(grid, [7, 8])
        assert result.to_list() == []
        assert dimensions(result) == [0, 4]

    def test_none_cells_are_kept(self):
        t = wrap([[None, 1], [None, None]])
        assert rows(t, [1, 0]) == [[None, None], [None, 1]]


class TestColumns:

    def test_span(self, grid):
        assert columns(grid, Span(1, 2)) == [[1, 2], [11, 12], [21, 22]]

    def test_picks_reorders(self, grid):
        assert columns(grid, [3, 0, 9]) == [[3, 0], [13, 10], [23, 20]]

    def test_single_int(self, grid):
        assert columns(grid, 2) == [[2], [12], [22]]

    def test_none_cells_are_kept(self):
        t = wrap([[None, 1], [2, None]])
        assert columns(t, [0]) == [[None], [2]]
        assert dimensions(columns(t, [0])) == [2, 1]

    def test_result_is_rectangular(self, grid):
        result = columns(grid, [0, 42, 1])
        assert dimensions(result) == [3, 2]

    def test_no_columns_left(self, grid):
        assert dimensions(columns(grid, [9])) == [3, 0]


class TestSliceAndRowsColumns:

    def test_slice(self, grid):
        assert selection.slice(grid, Span(0, 1), Span(2, 3)) == [[2, 3], [12, 13]]
        assert grid.slice(range(1, 3), range(0, 1)) == [[10], [20]]

    def test_slice_rejects_index_lists(self, grid):
        with pytest.raises(PyTableTypeError):
            grid.slice([0, 2], Span(0, 1))

    def test_slice_empty_range(self, grid):
        assert len(grid.slice(range(0), Span(0, 1))) == 0

    def test_rows_columns_mixed_specs(self, grid):
        assert rows_columns(grid, [2, 0], Span(1, 2)) == [[21, 22], [1, 2]]
        assert grid.rows_columns(Span(0, 0), [3, 3]) == [[3, 3]]

    def test_selection_does_not_touch_input(self, grid):
        before = grid.to_list()
        rows(grid, [2, 1])
        columns(grid, Span(0, 1))
        assert grid.to_list() == before

    def test_empty_table(self):
        assert rows(empty(), Span(0, 3)) == empty()
        assert columns(empty(), [0, 1]) == empty()
