"""
Selection specs for Table rows and columns.

Two shapes, each with its own filtering rule:
  - Span: contiguous inclusive range, resolved against the sequence length
  - Picks: explicit index list, reorder-and-filter
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .errors import PyTableTypeError, PyTableValueError


def resolve_index(index: int, length: int) -> Optional[int]:
    """
    Map a possibly negative index onto [0, length).

    Returns None when the index falls outside the sequence.
    """
    if index < 0:
        index += length
    if 0 <= index < length:
        return index
    return None


def _check_int(value, what):
    # bool is an int subclass but never a meaningful position
    if not isinstance(value, int) or isinstance(value, bool):
        raise PyTableTypeError(f"{what} must be an int, got {type(value).__name__}")


@dataclass(frozen=True)
class Span:
    """
    Contiguous, inclusive range of positions.

    Attributes
    ----------
    first : int
        First position (negative counts from the end)
    last : int
        Last position, inclusive (negative counts from the end)

    Notes
    -----
    The range is empty when the resolved ``first`` lies outside the
    sequence or comes after the resolved ``last``. A ``last`` beyond the
    end is clamped to the final position.

    Examples
    --------
    >>> Span(1, 2).positions(5)
    range(1, 3)
    >>> Span(1, -1).positions(3)
    range(1, 3)
    >>> Span(3, 1).positions(5)
    range(0, 0)
    """

    first: int
    last: int

    def __post_init__(self):
        _check_int(self.first, "Span.first")
        _check_int(self.last, "Span.last")

    def positions(self, length: int) -> range:
        first = self.first + length if self.first < 0 else self.first
        last = self.last + length if self.last < 0 else self.last
        if first < 0 or first >= length or last < first:
            return range(0)
        return range(first, min(last, length - 1) + 1)


@dataclass(frozen=True)
class Picks:
    """
    Explicit list of positions, selected in the order given.

    Indices outside the sequence produce no entry; duplicates repeat.
    Negative indices count from the end.

    Examples
    --------
    >>> Picks([2, 0, 5]).positions(3)
    [2, 0]
    >>> Picks([1, 1]).positions(3)
    [1, 1]
    """

    indices: Tuple[int, ...]

    def __init__(self, indices: Iterable[int]):
        indices = tuple(indices)
        for i in indices:
            _check_int(i, "Picks index")
        object.__setattr__(self, 'indices', indices)

    def positions(self, length: int) -> List[int]:
        out = []
        for index in self.indices:
            resolved = resolve_index(index, length)
            if resolved is not None:
                out.append(resolved)
        return out


Selector = Union[Span, Picks]


def as_selector(spec) -> Selector:
    """
    Normalize a caller-supplied selection spec.

    Accepts a Span or Picks unchanged, and converts plain Python values:
      - int i           -> Span(i, i)
      - range (step 1)  -> Span(start, stop - 1), or an empty Picks if the range is empty
      - list / tuple    -> Picks
    """
    if isinstance(spec, (Span, Picks)):
        return spec
    if isinstance(spec, range):
        if spec.step != 1:
            raise PyTableValueError(f"Only step-1 ranges can select rows or columns, got step {spec.step}")
        if not spec:
            return Picks(())
        return Span(spec.start, spec.stop - 1)
    if isinstance(spec, (list, tuple)):
        return Picks(spec)
    if isinstance(spec, int) and not isinstance(spec, bool):
        return Span(spec, spec)
    raise PyTableTypeError(
        f"Selection must be a Span, Picks, range, int or list of ints, got {type(spec).__name__}"
    )
