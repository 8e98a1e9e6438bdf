"""
Element-wise and row-wise traversal.

These walk the stored rows, so the canonical empty table contributes its
single empty row: map_rows(empty(), len) == [0].
"""

from .table import Table


def map_rows(table, func):
	"""Apply func to each row tuple and return the list of results."""
	return [func(row) for row in table._rows]


def map(table, func):
	"""Apply func to every cell; the shape is unchanged."""
	rows = tuple(tuple(func(cell) for cell in row) for row in table._rows[:table._shape[0]])
	return Table._from_rows(rows, table._shape[1])


def reduce(table, seed, func):
	"""
	Two-level fold with func(value, accumulator).

	Each row is folded starting from seed, then the per-row results are
	folded together starting from seed again. With addition and seed 10,
	[[1, 2], [3, 4]] gives 10 + (10 + 1 + 2) + (10 + 3 + 4) == 40.
	"""
	row_results = []
	for row in table._rows:
		acc = seed
		for cell in row:
			acc = func(cell, acc)
		row_results.append(acc)

	acc = seed
	for value in row_results:
		acc = func(value, acc)
	return acc


def with_index(table):
	"""
	Pair every cell with its column index and every row with its row index.

	>>> with_index(Table([[10, 20]]))
	[([(10, 0), (20, 1)], 0)]
	"""
	return [
		([(cell, c) for c, cell in enumerate(row)], r)
		for r, row in enumerate(table._rows)
	]
