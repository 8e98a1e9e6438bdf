from typing import Any, Callable, Generic, Iterator, List, Tuple, TypeVar

from .errors import DimensionMismatch, PyTableTypeError


T = TypeVar('T')
U = TypeVar('U')

_EMPTY_ROWS = ((),)


def _as_row(row, index) -> tuple:
	if isinstance(row, (str, bytes, bytearray)):
		raise PyTableTypeError(f"Row {index} is a {type(row).__name__}, expected a sequence of cells")
	try:
		return tuple(row)
	except TypeError:
		raise PyTableTypeError(f"Row {index} is not iterable: {type(row).__name__}") from None


def _rectangular(rows) -> Tuple[tuple, int]:
	"""Freeze rows into tuples and check they all share the first row's width."""
	rows = tuple(_as_row(row, i) for i, row in enumerate(rows))
	if not rows:
		return rows, 0
	width = len(rows[0])
	for i, row in enumerate(rows):
		if len(row) != width:
			raise DimensionMismatch(
				f"Row {i} has {len(row)} cells but row 0 has {width}; tables must be rectangular",
				dimension_name="column",
				expected=width,
				actual=len(row),
			)
	return rows, width


class Table(Generic[T]):
	"""
	Immutable, rectangular grid of cells stored as a tuple of row tuples.

	Given the table
		1 2
		3 4
		5 6
	the rows are ((1, 2), (3, 4), (5, 6)), x_dimension() is 2 and
	y_dimension() is 3.

	The canonical empty table holds a single empty row and has shape (0, 0).
	Every operation returns a new Table (or a plain value); nothing mutates.
	"""
	__slots__ = ('_rows', '_shape')

	def __init__(self, initial=()):
		if isinstance(initial, Table):
			rows, shape = initial._rows, initial._shape
		else:
			if isinstance(initial, (str, bytes, bytearray)) or not hasattr(initial, '__iter__'):
				raise PyTableTypeError(f"Table expects an iterable of rows, got {type(initial).__name__}")
			rows, width = _rectangular(initial)
			# only non-empty rows count, so all-empty input is the canonical empty table
			if not width:
				rows = ()
			rows, shape = self._normalize(rows, width)
		object.__setattr__(self, '_rows', rows)
		object.__setattr__(self, '_shape', shape)

	@staticmethod
	def _normalize(rows, column_count):
		if not rows and not column_count:
			return _EMPTY_ROWS, (0, 0)
		return rows, (len(rows), column_count)

	@classmethod
	def _from_rows(cls, rows, column_count):
		"""Wrap rows that are already tuples of equal width, skipping validation."""
		table = object.__new__(cls)
		rows, shape = cls._normalize(tuple(rows), column_count)
		object.__setattr__(table, '_rows', rows)
		object.__setattr__(table, '_shape', shape)
		return table

	def __setattr__(self, name, value):
		raise AttributeError(f"{self.__class__.__name__} is immutable; operations return new tables")

	def __delattr__(self, name):
		raise AttributeError(f"{self.__class__.__name__} is immutable; operations return new tables")

	#-----------------------------------------------------
	# Construction
	#-----------------------------------------------------

	@classmethod
	def build(cls, row_count: int, column_count: int, generator: Callable[[int, int], T]) -> "Table[T]":
		from .construction import build
		return build(row_count, column_count, generator)

	@classmethod
	def build_random(cls, row_count: int, column_count: int, rng=None) -> "Table[float]":
		from .construction import build_random
		return build_random(row_count, column_count, rng)

	@classmethod
	def wrap(cls, rows) -> "Table":
		from .construction import wrap
		return wrap(rows)

	@classmethod
	def from_columns(cls, columns) -> "Table":
		from .construction import from_columns
		return from_columns(columns)

	@classmethod
	def empty(cls) -> "Table":
		from .construction import empty
		return empty()

	#-----------------------------------------------------
	# Python protocols
	#-----------------------------------------------------

	def __len__(self):
		return self._shape[0]

	def __iter__(self) -> Iterator[tuple]:
		"""Iterate over row tuples (none for a table without rows)."""
		return iter(self._rows[:self._shape[0]])

	def __getitem__(self, key):
		if isinstance(key, tuple) and len(key) == 2:
			return self.at(*key)
		raise PyTableTypeError(f"Table indices must be a (row, column) pair, not {type(key).__name__}")

	def __eq__(self, other):
		if isinstance(other, Table):
			return self._shape == other._shape and self._rows == other._rows
		if isinstance(other, (list, tuple)):
			if not all(isinstance(row, (list, tuple)) for row in other):
				return False
			return self.to_list() == [list(row) for row in other]
		return NotImplemented

	__hash__ = None

	def __repr__(self):
		from .display import _printr
		return _printr(self)

	def to_list(self) -> List[list]:
		""" Fresh list of lists; the canonical empty table gives [[]] """
		return [list(row) for row in self._rows]

	#-----------------------------------------------------
	# Shape
	#-----------------------------------------------------

	def dimensions(self) -> List[int]:
		from .shape import dimensions
		return dimensions(self)

	def x_dimension(self) -> int:
		from .shape import x_dimension
		return x_dimension(self)

	def y_dimension(self) -> int:
		from .shape import y_dimension
		return y_dimension(self)

	def check_dimensional_compatibility(self, values, dimension: int) -> None:
		from .shape import check_dimensional_compatibility
		check_dimensional_compatibility(self, values, dimension)

	#-----------------------------------------------------
	# Selection
	#-----------------------------------------------------

	def at(self, row: int, column: int):
		from .selection import at
		return at(self, row, column)

	def slice(self, row_span, column_span) -> "Table[T]":
		from .selection import slice
		return slice(self, row_span, column_span)

	def rows(self, spec) -> "Table[T]":
		from .selection import rows
		return rows(self, spec)

	def columns(self, spec) -> "Table[T]":
		from .selection import columns
		return columns(self, spec)

	def rows_columns(self, row_spec, column_spec) -> "Table[T]":
		from .selection import rows_columns
		return rows_columns(self, row_spec, column_spec)

	#-----------------------------------------------------
	# Traversal
	#-----------------------------------------------------

	def map(self, func: Callable[[T], U]) -> "Table[U]":
		from .traversal import map
		return map(self, func)

	def map_rows(self, func: Callable[[tuple], U]) -> List[U]:
		from .traversal import map_rows
		return map_rows(self, func)

	def reduce(self, seed, func: Callable[[Any, Any], Any]):
		from .traversal import reduce
		return reduce(self, seed, func)

	def with_index(self) -> List[Tuple[List[Tuple[T, int]], int]]:
		from .traversal import with_index
		return with_index(self)

	#-----------------------------------------------------
	# Mutation (always returns new tables)
	#-----------------------------------------------------

	def append_column(self, column) -> "Table[T]":
		from .mutation import append_column
		return append_column(self, column)

	def remove_column(self, column_index, return_removed: bool = True):
		from .mutation import remove_column
		return remove_column(self, column_index, return_removed)

	def transpose(self) -> "Table[T]":
		from .mutation import transpose
		return transpose(self)

	@property
	def T(self) -> "Table[T]":
		return self.transpose()
