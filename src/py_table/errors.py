class PyTableError(Exception):
	"""Base exception for py-table library."""
	pass


class PyTableTypeError(PyTableError, TypeError):
	"""Raised for invalid types in API calls."""
	pass


class PyTableValueError(PyTableError, ValueError):
	"""Raised for invalid values or mismatched lengths."""
	pass


class DimensionMismatch(PyTableValueError):
	"""
	Raised when a list's length disagrees with one of the table's dimensions.

	Attributes
	----------
	dimension : int or None
		1 for the row count, 0 for the column count, None when raised for
		ragged input at construction.
	dimension_name : str
		"row" or "column"
	expected : int
		The table's length along that dimension
	actual : int
		The offending length
	"""

	def __init__(self, message, dimension=None, dimension_name=None, expected=None, actual=None):
		super().__init__(message)
		self.dimension = dimension
		self.dimension_name = dimension_name
		self.expected = expected
		self.actual = actual
