"""Ways of creating a Table."""

import random

from .errors import PyTableValueError
from .table import Table


def build(row_count, column_count, generator):
	"""
	Build a row_count x column_count table where cell (r, c) is generator(r, c).

	Both r and c are 1-indexed. The generator is called in row-major order.
	"""
	for name, count in (("row_count", row_count), ("column_count", column_count)):
		if not isinstance(count, int) or isinstance(count, bool) or count < 0:
			raise PyTableValueError(f"{name} must be a non-negative int, got {count!r}")
	rows = tuple(
		tuple(generator(r, c) for c in range(1, column_count + 1))
		for r in range(1, row_count + 1)
	)
	return Table._from_rows(rows, column_count)


def build_random(row_count, column_count, rng=None):
	""" Table of floats in [0, 1). Pass a random.Random instance for reproducible output. """
	source = random if rng is None else rng
	return build(row_count, column_count, lambda _r, _c: source.random())


def wrap(rows):
	"""
	Wrap row-major data in a Table.

	Accepts nested lists, a list of fixed-arity tuples (each tuple becomes a
	row), any iterable of iterables, or an existing Table (returned as is).
	Rows of unequal length raise DimensionMismatch.
	"""
	if isinstance(rows, Table):
		return rows
	return Table(rows)


def from_columns(columns):
	"""
	Build a Table from column-major data.

	[[1, 3, 5], [2, 4, 6]] -> [[1, 2], [3, 4], [5, 6]]
	"""
	return Table(columns).transpose()


def empty():
	return Table()
