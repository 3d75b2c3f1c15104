"""Nussinov RNA secondary-structure folding by dynamic programming."""

from __future__ import annotations

from typing import NamedTuple, Sequence, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.INT


class NussinovSizes(NamedTuple):
    """Length of the RNA sequence."""

    n: int


_SIZES = {
    Dataset.MINI: NussinovSizes(60),
    Dataset.SMALL: NussinovSizes(180),
    Dataset.MEDIUM: NussinovSizes(500),
    Dataset.LARGE: NussinovSizes(2500),
    Dataset.EXTRALARGE: NussinovSizes(5500),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> NussinovSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def match(b1, b2) -> int:
    """1 when bases *b1* and *b2* (coded 0..3) pair up, else 0."""
    return 1 if int(b1) + int(b2) == 3 else 0


def init_array(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the base sequence of length *n* and a zeroed score table."""
    seq = ((np.arange(n) + 1) % 4).astype(np.int8)
    table = np.zeros((n, n), dtype=DATA_TYPE.dtype)
    return seq, table


def kernel_nussinov(n: int, seq: Sequence[int], table: np.ndarray) -> np.ndarray:
    """Fill the upper triangle of *table* with best pairing scores and return it."""
    table = np.asarray(table)
    for i in reversed(range(n)):
        for j in range(i + 1, n):
            best = int(table[i, j])
            if j - 1 >= 0:
                best = max(best, int(table[i, j - 1]))
            if i + 1 < n:
                best = max(best, int(table[i + 1, j]))
            if j - 1 >= 0 and i + 1 < n:
                # Adjacent bases may not bond.
                if i < j - 1:
                    best = max(best, int(table[i + 1, j - 1]) + match(seq[i], seq[j]))
                else:
                    best = max(best, int(table[i + 1, j - 1]))
            if j > i + 1:
                splits = table[i, i + 1 : j].astype(np.int64) + table[i + 2 : j + 1, j]
                best = max(best, int(splits.max()))
            table[i, j] = best
    return table


def print_array(table: np.ndarray, stream: TextIO | None = None) -> None:
    """Dump the upper triangle of the score table, diagonal included."""
    table = np.asarray(table)
    rows, cols = np.triu_indices(table.shape[0], m=table.shape[1])
    with ArrayDump(stream, DATA_TYPE) as dump:
        dump.array("table", table[rows, cols])


def run(dataset: Dataset | str = DEFAULT_DATASET) -> np.ndarray:
    """Initialise the data of *dataset* and return the filled score table."""
    (n,) = sizes(dataset)
    seq, table = init_array(n)
    return kernel_nussinov(n, seq, table)