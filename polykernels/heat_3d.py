"""Three-dimensional heat-equation stencil."""

from __future__ import annotations

from typing import NamedTuple, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.DOUBLE


class Heat3dSizes(NamedTuple):
    """Number of time steps and cube side."""

    tsteps: int
    n: int


_SIZES = {
    Dataset.MINI: Heat3dSizes(20, 10),
    Dataset.SMALL: Heat3dSizes(40, 20),
    Dataset.MEDIUM: Heat3dSizes(100, 40),
    Dataset.LARGE: Heat3dSizes(500, 120),
    Dataset.EXTRALARGE: Heat3dSizes(1000, 200),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> Heat3dSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def init_array(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return two equal ``n``-cubed initial grids ``a`` and ``b``."""
    i = np.arange(n, dtype=np.float64)[:, None, None]
    j = np.arange(n, dtype=np.float64)[None, :, None]
    k = np.arange(n, dtype=np.float64)[None, None, :]
    a = (i + j + (n - k)) * 10 / n
    return a, a.copy()


def _step(src: np.ndarray, dst: np.ndarray) -> None:
    c = src[1:-1, 1:-1, 1:-1]
    dst[1:-1, 1:-1, 1:-1] = (
        0.125 * (src[2:, 1:-1, 1:-1] - 2.0 * c + src[:-2, 1:-1, 1:-1])
        + 0.125 * (src[1:-1, 2:, 1:-1] - 2.0 * c + src[1:-1, :-2, 1:-1])
        + 0.125 * (src[1:-1, 1:-1, 2:] - 2.0 * c + src[1:-1, 1:-1, :-2])
        + c
    )


def kernel_heat_3d(tsteps: int, n: int, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Run *tsteps* double sweeps over the ``n``-cubed blocks in place; return *a*."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    ba = a[:n, :n, :n]
    bb = b[:n, :n, :n]
    if n < 3:
        return a
    for _ in range(tsteps):
        _step(ba, bb)
        _step(bb, ba)
    return a


def print_array(a: np.ndarray, stream: TextIO | None = None) -> None:
    """Dump the grid."""
    with ArrayDump(stream, DATA_TYPE) as dump:
        dump.array("A", np.asarray(a))


def run(dataset: Dataset | str = DEFAULT_DATASET) -> np.ndarray:
    """Initialise the data of *dataset* and return the final grid."""
    tsteps, n = sizes(dataset)
    a, b = init_array(n)
    return kernel_heat_3d(tsteps, n, a, b)