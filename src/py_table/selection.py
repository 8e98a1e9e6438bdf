"""
Point, range and index-list access.

None of these raise on out-of-range positions: point lookups return None
and selections simply leave the missing positions out.
"""

from .errors import PyTableTypeError
from .selectors import Picks, as_selector, resolve_index
from .table import Table


def at(table, row, column):
	"""Cell at (row, column), or None if either index is out of range."""
	r = resolve_index(row, table._shape[0])
	if r is None:
		return None
	c = resolve_index(column, table._shape[1])
	if c is None:
		return None
	return table._rows[r][c]


def _contiguous(spec, what):
	selector = as_selector(spec)
	# an empty range arrives as an empty Picks, which selects nothing either way
	if isinstance(selector, Picks) and selector.indices:
		raise PyTableTypeError(f"slice() takes contiguous {what} ranges, got an index list")
	return selector


def slice(table, row_span, column_span):
	"""
	Sub-table where both the rows and the columns are contiguous ranges.

	Bounds are inclusive: slice(t, Span(0, 1), Span(1, 2)) keeps rows 0-1
	and columns 1-2.
	"""
	return columns(rows(table, _contiguous(row_span, "row")), _contiguous(column_span, "column"))


def rows(table, spec):
	"""
	Select rows by Span (contiguous, inclusive) or Picks (any order, repeats
	allowed, out-of-range indices dropped).
	"""
	selector = as_selector(spec)
	present = table._rows[:table._shape[0]]
	picked = tuple(present[i] for i in selector.positions(len(present)))
	return Table._from_rows(picked, table._shape[1])


def columns(table, spec):
	"""Select columns with the same rules as rows(); every row keeps the same positions."""
	selector = as_selector(spec)
	positions = list(selector.positions(table._shape[1]))
	present = table._rows[:table._shape[0]]
	picked = tuple(tuple(row[p] for p in positions) for row in present)
	return Table._from_rows(picked, len(positions))


def rows_columns(table, row_spec, column_spec):
	return columns(rows(table, row_spec), column_spec)
