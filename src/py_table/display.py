"""Display and repr logic for Table."""

from __future__ import annotations
from datetime import date
from typing import List, Optional


# How many rows/columns to show at each end before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5


def _is_numeric(v) -> bool:
	return isinstance(v, (int, float, complex)) and not isinstance(v, bool)


def _format_cell(v) -> str:
	if isinstance(v, float):
		return f"{v:.1f}" if v.is_integer() else f"{v:g}"
	if isinstance(v, date):
		return v.isoformat()
	if isinstance(v, str):
		return repr(v)
	return str(v)


def _preview(length: int, keep: int) -> List[Optional[int]]:
	"""Positions to show, with None standing in for the elided middle."""
	if length > keep * 2:
		return list(range(keep)) + [None] + list(range(length - keep, length))
	return list(range(length))


def _format_column(rows, row_positions, c) -> List[str]:
	"""Returns a list of strings for column c, padded to a common width."""
	values = [rows[r][c] for r in row_positions if r is not None]
	out = ['...' if r is None else _format_cell(rows[r][c]) for r in row_positions]

	# Align: numeric right, others left
	width = max(len(s) for s in out) if out else 0
	if values and all(_is_numeric(v) for v in values):
		return [s.rjust(width) for s in out]
	return [s.ljust(width) for s in out]


def _footer(table) -> str:
	row_count, column_count = table._shape
	return f"# {row_count}×{column_count} table"


def _printr(table) -> str:
	"""Entry point used by Table.__repr__."""
	row_count, column_count = table._shape
	if not row_count or not column_count:
		return _footer(table)

	rows = table._rows
	row_positions = _preview(row_count, MAX_HEAD_ROWS)
	formatted_cols = []
	for c in _preview(column_count, MAX_HEAD_COLS):
		if c is None:
			formatted_cols.append(['...' for _ in row_positions])
		else:
			formatted_cols.append(_format_column(rows, row_positions, c))

	lines = []
	for i in range(len(row_positions)):
		lines.append("  ".join(col[i] for col in formatted_cols).rstrip())

	lines.append("")
	lines.append(_footer(table))
	return "\n".join(lines)
