"""Two-dimensional finite-difference time-domain electromagnetic kernel."""

from __future__ import annotations

from typing import Iterator, NamedTuple, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.DOUBLE


class Fdtd2dSizes(NamedTuple):
    """Number of time steps and grid extents."""

    tmax: int
    nx: int
    ny: int


_SIZES = {
    Dataset.MINI: Fdtd2dSizes(20, 20, 30),
    Dataset.SMALL: Fdtd2dSizes(40, 60, 80),
    Dataset.MEDIUM: Fdtd2dSizes(100, 200, 240),
    Dataset.LARGE: Fdtd2dSizes(500, 1000, 1200),
    Dataset.EXTRALARGE: Fdtd2dSizes(1000, 2000, 2600),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> Fdtd2dSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def init_array(
    tmax: int, nx: int, ny: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return the fields ``ex``, ``ey``, ``hz`` and the source values ``fict``."""
    fict = np.arange(tmax, dtype=np.float64)
    i = np.arange(nx, dtype=np.float64)[:, None]
    j = np.arange(ny, dtype=np.float64)[None, :]
    ex = (i * (j + 1)) / nx
    ey = (i * (j + 2)) / ny
    hz = (i * (j + 3)) / nx
    return ex, ey, hz, fict


def kernel_fdtd_2d(
    tmax: int,
    nx: int,
    ny: int,
    ex: np.ndarray,
    ey: np.ndarray,
    hz: np.ndarray,
    fict: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Advance the fields by *tmax* steps in place and return ``(ex, ey, hz)``."""
    ex = np.asarray(ex, dtype=np.float64)
    ey = np.asarray(ey, dtype=np.float64)
    hz = np.asarray(hz, dtype=np.float64)
    fict = np.asarray(fict, dtype=np.float64)
    bex = ex[:nx, :ny]
    bey = ey[:nx, :ny]
    bhz = hz[:nx, :ny]

    for t in range(tmax):
        bey[0, :] = fict[t]
        bey[1:, :] -= 0.5 * (bhz[1:, :] - bhz[:-1, :])
        bex[:, 1:] -= 0.5 * (bhz[:, 1:] - bhz[:, :-1])
        bhz[:-1, :-1] -= 0.7 * (
            bex[:-1, 1:] - bex[:-1, :-1] + bey[1:, :-1] - bey[:-1, :-1]
        )
    return ex, ey, hz


def _cells(field: np.ndarray, nx: int) -> Iterator[tuple[int, float]]:
    # Line breaks follow the row stride nx, not the row length.
    for (i, j), value in np.ndenumerate(field):
        yield i * nx + j, value


def print_array(
    ex: np.ndarray, ey: np.ndarray, hz: np.ndarray, stream: TextIO | None = None
) -> None:
    """Dump the three fields; only ``ex`` sits between the dump markers."""
    ex, ey, hz = (np.asarray(a) for a in (ex, ey, hz))
    nx = ex.shape[0]
    dump = ArrayDump(stream, DATA_TYPE)
    with dump:
        dump.array("ex", _cells(ex, nx))
    dump.array("ey", _cells(ey, nx))
    dump.array("hz", _cells(hz, nx))


def run(
    dataset: Dataset | str = DEFAULT_DATASET,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Initialise the data of *dataset* and return the final fields."""
    tmax, nx, ny = sizes(dataset)
    ex, ey, hz, fict = init_array(tmax, nx, ny)
    return kernel_fdtd_2d(tmax, nx, ny, ex, ey, hz, fict)