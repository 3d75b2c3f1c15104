"""One-dimensional Jacobi stencil."""

from __future__ import annotations

from typing import NamedTuple, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.DOUBLE
WEIGHT = 0.33333


class Jacobi1dSizes(NamedTuple):
    """Number of time steps and vector length."""

    tsteps: int
    n: int


_SIZES = {
    Dataset.MINI: Jacobi1dSizes(20, 30),
    Dataset.SMALL: Jacobi1dSizes(40, 120),
    Dataset.MEDIUM: Jacobi1dSizes(100, 400),
    Dataset.LARGE: Jacobi1dSizes(500, 2000),
    Dataset.EXTRALARGE: Jacobi1dSizes(1000, 4000),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> Jacobi1dSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def init_array(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the initial vectors ``a`` and ``b`` of length *n*."""
    i = np.arange(n, dtype=np.float64)
    return (i + 2) / n, (i + 3) / n


def kernel_jacobi_1d(tsteps: int, n: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Run *tsteps* double sweeps over the first *n* elements in place; return *a*."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    va = a[:n]
    vb = b[:n]
    if n < 3:
        return a
    for _ in range(tsteps):
        vb[1:-1] = WEIGHT * (va[:-2] + va[1:-1] + va[2:])
        va[1:-1] = WEIGHT * (vb[:-2] + vb[1:-1] + vb[2:])
    return a


def print_array(a: np.ndarray, stream: TextIO | None = None) -> None:
    """Dump the vector."""
    with ArrayDump(stream, DATA_TYPE) as dump:
        dump.array("A", np.asarray(a))


def run(dataset: Dataset | str = DEFAULT_DATASET) -> np.ndarray:
    """Initialise the data of *dataset* and return the final vector."""
    tsteps, n = sizes(dataset)
    a, b = init_array(n)
    return kernel_jacobi_1d(tsteps, n, a, b)