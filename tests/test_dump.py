import io

import numpy as np
import pytest

from polykernels.dump import DUMP_FINISH, DUMP_START, ArrayDump, DataType


def test_int_format():
    assert DataType.INT.format_value(5) == "5 "


def test_float_format_two_decimals():
    assert DataType.FLOAT.format_value(1.5) == "1.50 "


def test_double_and_float_agree():
    for value in (0.0, 3.25, -7.0, 123.456):
        assert DataType.DOUBLE.format_value(value) == DataType.FLOAT.format_value(value)


def test_dtypes():
    assert DataType.INT.dtype == np.dtype(np.int32)
    assert DataType.FLOAT.dtype == np.dtype(np.float32)
    assert DataType.DOUBLE.dtype == np.dtype(np.float64)
    int_value = np.array([7], dtype=DataType.INT.dtype)[0]
    float_value = np.array([2.5], dtype=DataType.FLOAT.dtype)[0]
    assert DataType.INT.format_value(int_value) == "7 "
    assert DataType.FLOAT.format_value(float_value) == "2.50 "


def test_context_writes_markers():
    out = io.StringIO()
    with ArrayDump(out, DataType.INT):
        pass
    assert out.getvalue() == "==BEGIN DUMP_ARRAYS==\n==END   DUMP_ARRAYS==\n"


def test_array_layout_breaks_every_twenty():
    out = io.StringIO()
    dump = ArrayDump(out, DataType.INT)
    dump.array("A", range(25))
    text = out.getvalue()
    assert text.startswith("begin dump: A\n")
    assert text.endswith("\nend   dump: A\n")
    lines = text.split("\n")
    assert lines[1].split() == [str(v) for v in range(20)]
    assert lines[2].split() == [str(v) for v in range(20, 25)]


def test_numpy_array_in_row_major_order():
    out = io.StringIO()
    values = np.arange(6, dtype=np.int32).reshape(2, 3)
    ArrayDump(out, DataType.INT).array("M", values)
    body = out.getvalue().split("\n")[1]
    assert body.split() == ["0", "1", "2", "3", "4", "5"]


def test_positions_control_line_breaks():
    out = io.StringIO()
    ArrayDump(out, DataType.INT).array("P", [(19, 1), (20, 2), (21, 3)])
    lines = out.getvalue().split("\n")
    assert lines[0] == "begin dump: P1 "
    assert lines[1] == "2 3 "


def test_full_dump_inside_context():
    out = io.StringIO()
    with ArrayDump(out, DataType.DOUBLE) as dump:
        dump.array("x", [1.0])
    text = out.getvalue()
    assert text.startswith(DUMP_START + "begin dump: x")
    assert text.endswith("end   dump: x\n" + DUMP_FINISH)


def test_finish_written_when_body_raises():
    out = io.StringIO()
    with pytest.raises(KeyError):
        with ArrayDump(out, DataType.INT):
            raise KeyError("boom")
    assert out.getvalue().endswith(DUMP_FINISH)