import pytest
from py_table import wrap, append_column, check_dimensional_compatibility
from py_table.errors import PyTableError, PyTableTypeError, PyTableValueError, DimensionMismatch


def test_dimension_mismatch_hierarchy():
    assert issubclass(DimensionMismatch, PyTableValueError)
    assert issubclass(DimensionMismatch, ValueError)
    assert issubclass(PyTableTypeError, TypeError)
    assert issubclass(PyTableValueError, PyTableError)


def test_append_column_mismatch_is_catchable_as_library_error():
    t = wrap([[1, 2], [3, 4]])
    with pytest.raises(PyTableError):
        append_column(t, [1, 2, 3])


def test_append_column_reports_column_dimension():
    t = wrap([[1, 2], [3, 4], [5, 6]])
    with pytest.raises(DimensionMismatch) as exc:
        t.append_column([1])
    assert str(exc.value) == "Table dimension 3 does not match the column dimension 1"
    assert exc.value.dimension == 0
    assert exc.value.dimension_name == "column"
    assert exc.value.expected == 3
    assert exc.value.actual == 1


def test_bad_selector_type_raises_pytable_typeerror():
    with pytest.raises(PyTableTypeError):
        wrap([[1]]).rows({0})


def test_mismatch_propagates_unchanged():
    t = wrap([[1]])
    with pytest.raises(DimensionMismatch):
        check_dimensional_compatibility(t, [1, 2], 1)
