"""Shape-changing operations. Each returns a new Table."""

import warnings

from .selection import columns
from .selectors import Span, as_selector
from .shape import check_column_length
from .table import Table


def append_column(table, column):
	"""
	Add `column` as the new FIRST column.

	column[i] becomes cell 0 of row i, so len(column) must equal the row count.

	>>> append_column(Table([[1, 2], [3, 4], [5, 6]]), [9, 9, 9]).to_list()
	[[9, 1, 2], [9, 3, 4], [9, 5, 6]]
	"""
	column = tuple(column)
	check_column_length(table, column)
	row_count, column_count = table._shape
	rows = tuple((value,) + row for value, row in zip(column, table._rows[:row_count]))
	return Table._from_rows(rows, column_count + 1)


def remove_column(table, column_index, return_removed=True):
	"""
	Drop the first column and extract the cells addressed by `column_index`.

	Args:
		table: Source table.
		column_index: An int, Span or range naming the column(s) to extract.
		return_removed: When true, return (remaining, removed); otherwise only
			the remaining table.

	Returns:
		The remaining table is always every column from position 1 onward.
		`removed` is a flat, row-major list of the cells addressed by
		`column_index`, which need not be column 0.
	"""
	selector = as_selector(column_index)
	if table._shape[1] and list(selector.positions(table._shape[1])) != [0]:
		warnings.warn(
			f"remove_column({column_index!r}) extracts the requested column but always drops column 0 "
			"from the remaining table",
			stacklevel=2,
		)

	removed = [cell for row in columns(table, selector) for cell in row]
	remaining = columns(table, Span(1, -1))
	if return_removed:
		return remaining, removed
	return remaining


def transpose(table):
	"""Swap rows and columns: shape (r, c) becomes (c, r)."""
	row_count, column_count = table._shape
	rows = table._rows
	transposed = tuple(
		tuple(rows[r][c] for r in range(row_count))
		for c in range(column_count)
	)
	return Table._from_rows(transposed, row_count)
