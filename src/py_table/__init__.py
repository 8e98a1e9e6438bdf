"""
py-table: A Pythonic, zero-dependency rectangular table library

Spreadsheet-style access to a dense, in-memory grid of cells: by position,
by contiguous range or by an explicit list of indices, plus append, remove
and transpose. Every operation returns a new table.

Main classes:
    - Table: immutable grid of rows (tuples of cells)
    - Span: contiguous, inclusive selection
    - Picks: explicit index-list selection (reorder-and-filter)

Every Table method is also available as a function taking the table first,
e.g. py_table.rows(t, Picks([2, 0])) == t.rows(Picks([2, 0])).

Zero external dependencies - pure Python stdlib only.
"""

from .table import Table
from .selectors import Span, Picks, as_selector
from .errors import PyTableError, PyTableTypeError, PyTableValueError, DimensionMismatch
from .construction import build, build_random, wrap, from_columns, empty
from .shape import dimensions, x_dimension, y_dimension, check_dimensional_compatibility
from .shape import ROW_DIMENSION, COLUMN_DIMENSION
from .selection import at, slice, rows, columns, rows_columns
from .traversal import map, map_rows, reduce, with_index
from .mutation import append_column, remove_column, transpose

__version__ = "0.1.0"

# map, slice and reduce are left out so that star imports do not shadow builtins
__all__ = [
	"Table",
	"Span",
	"Picks",
	"as_selector",
	"build",
	"build_random",
	"wrap",
	"from_columns",
	"empty",
	"dimensions",
	"x_dimension",
	"y_dimension",
	"check_dimensional_compatibility",
	"ROW_DIMENSION",
	"COLUMN_DIMENSION",
	"at",
	"rows",
	"columns",
	"rows_columns",
	"map_rows",
	"with_index",
	"append_column",
	"remove_column",
	"transpose",
	"PyTableError",
	"PyTableTypeError",
	"PyTableValueError",
	"DimensionMismatch",
]
