"""Array dumps in the benchmarks' plain-text format."""

from __future__ import annotations

import enum
import sys
from typing import Any, Iterable, TextIO

import numpy as np

DUMP_START = "==BEGIN DUMP_ARRAYS==\n"
DUMP_FINISH = "==END   DUMP_ARRAYS==\n"
VALUES_PER_LINE = 20


class DataType(enum.Enum):
    """Element type of a benchmark's arrays."""

    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"

    @property
    def dtype(self) -> np.dtype:
        """The numpy dtype that stores values of this type."""
        return np.dtype(
            {
                DataType.INT: np.int32,
                DataType.FLOAT: np.float32,
                DataType.DOUBLE: np.float64,
            }[self]
        )

    def format_value(self, value: Any) -> str:
        """Render one value as it appears in a dump, trailing space included."""
        if self is DataType.INT:
            return f"{int(value)} "
        return f"{float(value):0.2f} "


class ArrayDump:
    """Writes named arrays between the dump start and finish markers.

    Used as a context manager, the start marker is written on entry and the
    finish marker on exit. :meth:`array` may also be called outside a
    ``with`` block, in which case no markers are written around it.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        data_type: DataType = DataType.DOUBLE,
    ) -> None:
        self.stream = sys.stderr if stream is None else stream
        self.data_type = data_type

    def __enter__(self) -> "ArrayDump":
        self.stream.write(DUMP_START)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stream.write(DUMP_FINISH)

    def array(self, name: str, cells: Iterable[Any]) -> None:
        """Dump *cells* under *name*.

        *cells* holds plain values, numbered in order, or ``(position, value)``
        pairs. A line break is written before every value whose position is a
        multiple of twenty. A numpy array is dumped in row-major order.
        """
        if isinstance(cells, np.ndarray):
            cells = cells.ravel()
        parts = [f"begin dump: {name}"]
        for counter, cell in enumerate(cells):
            if isinstance(cell, tuple):
                position, value = cell
            else:
                position, value = counter, cell
            if position % VALUES_PER_LINE == 0:
                parts.append("\n")
            parts.append(self.data_type.format_value(value))
        parts.append(f"\nend   dump: {name}\n")
        self.stream.write("".join(parts))