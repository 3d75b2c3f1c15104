"""Alternating-direction implicit solver for 2-D heat diffusion."""

from __future__ import annotations

from typing import NamedTuple, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.DOUBLE


class AdiSizes(NamedTuple):
    """Number of time steps and grid side."""

    tsteps: int
    n: int


_SIZES = {
    Dataset.MINI: AdiSizes(20, 20),
    Dataset.SMALL: AdiSizes(40, 60),
    Dataset.MEDIUM: AdiSizes(100, 200),
    Dataset.LARGE: AdiSizes(500, 1000),
    Dataset.EXTRALARGE: AdiSizes(1000, 2000),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> AdiSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def init_array(n: int) -> np.ndarray:
    """Return the ``n`` by ``n`` initial grid."""
    i = np.arange(n, dtype=np.float64)[:, None]
    j = np.arange(n, dtype=np.float64)[None, :]
    return (i + n - j) / n


def kernel_adi(tsteps: int, n: int, u: np.ndarray) -> np.ndarray:
    """Advance grid *u* by *tsteps* steps in place and return it."""
    u = np.asarray(u, dtype=np.float64)
    if tsteps < 1 or n < 3:
        return u

    dx = 1.0 / n
    dy = 1.0 / n
    dt = 1.0 / tsteps
    b1, b2 = 2.0, 1.0
    mul1 = b1 * dt / (dx * dx)
    mul2 = b2 * dt / (dy * dy)

    a = -mul1 / 2.0
    b = 1.0 + mul1
    c = a
    d = -mul2 / 2.0
    e = 1.0 + mul2
    f = d

    v = np.zeros((n, n), dtype=np.float64)
    p = np.zeros((n, n), dtype=np.float64)
    q = np.zeros((n, n), dtype=np.float64)
    inner = slice(1, n - 1)
    left = slice(0, n - 2)
    right = slice(2, n)

    for _ in range(tsteps):
        # Column sweep: each column i of v is solved independently.
        v[0, inner] = 1.0
        p[inner, 0] = 0.0
        q[inner, 0] = v[0, inner]
        for j in range(1, n - 1):
            denom = a * p[inner, j - 1] + b
            p[inner, j] = -c / denom
            q[inner, j] = (
                -d * u[j, left]
                + (1.0 + 2.0 * d) * u[j, inner]
                - f * u[j, right]
                - a * q[inner, j - 1]
            ) / denom
        v[n - 1, inner] = 1.0
        for j in range(n - 2, 0, -1):
            v[j, inner] = p[inner, j] * v[j + 1, inner] + q[inner, j]

        # Row sweep: each row i of u is solved independently.
        u[inner, 0] = 1.0
        p[inner, 0] = 0.0
        q[inner, 0] = u[inner, 0]
        for j in range(1, n - 1):
            denom = d * p[inner, j - 1] + e
            p[inner, j] = -f / denom
            q[inner, j] = (
                -a * v[left, j]
                + (1.0 + 2.0 * a) * v[inner, j]
                - c * v[right, j]
                - d * q[inner, j - 1]
            ) / denom
        u[inner, n - 1] = 1.0
        for j in range(n - 2, 0, -1):
            u[inner, j] = p[inner, j] * u[inner, j + 1] + q[inner, j]

    return u


def print_array(u: np.ndarray, stream: TextIO | None = None) -> None:
    """Dump the grid."""
    with ArrayDump(stream, DATA_TYPE) as dump:
        dump.array("u", np.asarray(u))


def run(dataset: Dataset | str = DEFAULT_DATASET) -> np.ndarray:
    """Initialise the data of *dataset* and return the final grid."""
    tsteps, n = sizes(dataset)
    return kernel_adi(tsteps, n, init_array(n))