"""Floyd-Warshall all-pairs shortest paths over a dense distance matrix."""

from __future__ import annotations

from typing import NamedTuple, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.INT
UNREACHABLE = 999
"""Distance given to the edges that the initial graph leaves out."""


class FloydWarshallSizes(NamedTuple):
    """Number of graph nodes."""

    n: int


_SIZES = {
    Dataset.MINI: FloydWarshallSizes(60),
    Dataset.SMALL: FloydWarshallSizes(180),
    Dataset.MEDIUM: FloydWarshallSizes(500),
    Dataset.LARGE: FloydWarshallSizes(2800),
    Dataset.EXTRALARGE: FloydWarshallSizes(5600),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> FloydWarshallSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def init_array(n: int) -> np.ndarray:
    """Return the ``n`` by ``n`` initial distance matrix."""
    i = np.arange(n, dtype=np.int64)[:, None]
    j = np.arange(n, dtype=np.int64)[None, :]
    path = (i * j % 7 + 1).astype(DATA_TYPE.dtype)
    total = i + j
    path[(total % 13 == 0) | (total % 7 == 0) | (total % 11 == 0)] = UNREACHABLE
    return path


def _relax_exact(block: np.ndarray, k: int) -> None:
    """Relax through node *k* in exactly the order of the row-by-row scan.

    Needed only when ``block[k, k]`` is negative, where row and column *k*
    change during the pass and the order of updates becomes visible.
    """
    for i, row in enumerate(block):
        pivot = block[k]
        old = row[k]
        new = min(old, old + block[k, k])
        row[:k] = np.minimum(row[:k], old + pivot[:k])
        row[k] = new
        row[k + 1 :] = np.minimum(row[k + 1 :], new + pivot[k + 1 :])


def kernel_floyd_warshall(n: int, path: np.ndarray) -> np.ndarray:
    """Shorten the top-left ``n`` by ``n`` block of *path* in place and return it."""
    path = np.asarray(path)
    block = path[:n, :n]
    for k in range(n):
        if block[k, k] >= 0:
            # Row and column k stay fixed in this pass, so one update suffices.
            np.minimum(block, block[:, k : k + 1] + block[k : k + 1, :], out=block)
        else:
            _relax_exact(block, k)
    return path


def print_array(path: np.ndarray, stream: TextIO | None = None) -> None:
    """Dump the distance matrix."""
    with ArrayDump(stream, DATA_TYPE) as dump:
        dump.array("path", np.asarray(path))


def run(dataset: Dataset | str = DEFAULT_DATASET) -> np.ndarray:
    """Initialise the data of *dataset* and return the shortest-path matrix."""
    (n,) = sizes(dataset)
    return kernel_floyd_warshall(n, init_array(n))