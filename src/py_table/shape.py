"""
Table dimensions and length checks.

Dimension numbering used by check_dimensional_compatibility is NOT the
usual (row=0, column=1):

	ROW_DIMENSION = 1      compare against the row count, reported as "row"
	COLUMN_DIMENSION = 0   compare against the column count, reported as "column"
"""

from typing import List

from .errors import DimensionMismatch, PyTableValueError


ROW_DIMENSION = 1
COLUMN_DIMENSION = 0

_DIMENSION_NAMES = {
	ROW_DIMENSION: "row",
	COLUMN_DIMENSION: "column",
}


def dimensions(table) -> List[int]:
	"""Return [row_count, column_count]; the canonical empty table is [0, 0]."""
	row_count, column_count = table._shape
	return [row_count, column_count]


def x_dimension(table) -> int:
	"""Number of columns."""
	return table._shape[1]


def y_dimension(table) -> int:
	"""Number of rows."""
	return table._shape[0]


def dimension_name(dimension: int) -> str:
	try:
		return _DIMENSION_NAMES[dimension]
	except (KeyError, TypeError):
		raise PyTableValueError(
			f"Unknown dimension {dimension!r}; use {ROW_DIMENSION} (row) or {COLUMN_DIMENSION} (column)"
		) from None


def check_dimensional_compatibility(table, values, dimension: int) -> None:
	"""
	Raise DimensionMismatch unless len(values) matches the table along `dimension`.

	Args:
		table: The Table to compare against.
		values: A sized collection (iterables are consumed to count them).
		dimension: ROW_DIMENSION (1) or COLUMN_DIMENSION (0).

	Raises:
		DimensionMismatch: If the lengths differ.
		PyTableValueError: If `dimension` is neither 0 nor 1.
	"""
	dimension_name(dimension)
	if dimension == ROW_DIMENSION:
		table_dimension = y_dimension(table)
	else:
		table_dimension = x_dimension(table)

	list_dimension = _length(values)
	if list_dimension != table_dimension:
		raise _mismatch(table_dimension, list_dimension, dimension)


def check_column_length(table, column) -> None:
	"""
	A new column needs one value per row.

	The length is compared with the row count but reported as the column
	dimension (0), since the offending list is a column.
	"""
	list_dimension = _length(column)
	table_dimension = y_dimension(table)
	if list_dimension != table_dimension:
		raise _mismatch(table_dimension, list_dimension, COLUMN_DIMENSION)


def _length(values) -> int:
	try:
		return len(values)
	except TypeError:
		return sum(1 for _ in values)


def _mismatch(table_dimension, list_dimension, dimension) -> DimensionMismatch:
	name = _DIMENSION_NAMES[dimension]
	return DimensionMismatch(
		f"Table dimension {table_dimension} does not match the {name} dimension {list_dimension}",
		dimension=dimension,
		dimension_name=name,
		expected=table_dimension,
		actual=list_dimension,
	)
