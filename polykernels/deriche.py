"""Deriche recursive edge-detection filter over a grayscale image."""

from __future__ import annotations

from typing import NamedTuple, TextIO

import numpy as np

from polykernels.dump import ArrayDump, DataType
from polykernels.harness import DEFAULT_DATASET, Dataset

DATA_TYPE = DataType.FLOAT


class DericheSizes(NamedTuple):
    """Image width and height."""

    w: int
    h: int


_SIZES = {
    Dataset.MINI: DericheSizes(64, 64),
    Dataset.SMALL: DericheSizes(192, 128),
    Dataset.MEDIUM: DericheSizes(720, 480),
    Dataset.LARGE: DericheSizes(4096, 2160),
    Dataset.EXTRALARGE: DericheSizes(7680, 4320),
}


def sizes(dataset: Dataset | str = DEFAULT_DATASET) -> DericheSizes:
    """Problem sizes of *dataset*."""
    return _SIZES[Dataset.parse(dataset)]


def init_array(w: int, h: int) -> tuple[np.float32, np.ndarray]:
    """Return the filter parameter alpha and a ``w`` by ``h`` input image in [0, 1]."""
    alpha = np.float32(0.25)
    raw = np.add.outer(313 * np.arange(w, dtype=np.int64), 991 * np.arange(h, dtype=np.int64))
    img_in = (raw % 65536).astype(np.float32) / np.float32(65535.0)
    return alpha, img_in


def kernel_deriche(w: int, h: int, alpha, img_in: np.ndarray) -> np.ndarray:
    """Apply the filter to the top-left ``w`` by ``h`` block of *img_in*."""
    f = np.float32
    alpha = f(alpha)
    one, two = f(1.0), f(2.0)
    x = np.asarray(img_in, dtype=np.float32)[:w, :h]

    e = np.exp(-alpha)
    k = (one - e) * (one - e) / (one + two * alpha * e - np.exp(two * alpha))
    a1 = a5 = k
    a2 = a6 = k * e * (alpha - one)
    a3 = a7 = k * e * (alpha + one)
    a4 = a8 = -k * np.exp(f(-2.0) * alpha)
    b1 = np.power(two, -alpha)
    b2 = -np.exp(f(-2.0) * alpha)
    c1 = c2 = f(1.0)

    y1 = np.zeros((w, h), dtype=np.float32)
    y2 = np.zeros((w, h), dtype=np.float32)

    # Horizontal passes: rows are independent, the recurrence runs along j.
    ym1 = ym2 = xm1 = np.zeros(w, dtype=np.float32)
    for j in range(h):
        y1[:, j] = a1 * x[:, j] + a2 * xm1 + b1 * ym1 + b2 * ym2
        xm1 = x[:, j]
        ym2, ym1 = ym1, y1[:, j]

    yp1 = yp2 = xp1 = xp2 = np.zeros(w, dtype=np.float32)
    for j in reversed(range(h)):
        y2[:, j] = a3 * xp1 + a4 * xp2 + b1 * yp1 + b2 * yp2
        xp2, xp1 = xp1, x[:, j]
        yp2, yp1 = yp1, y2[:, j]

    img_out = c1 * (y1 + y2)

    # Vertical passes: columns are independent, the recurrence runs along i.
    tm1 = ym1 = ym2 = np.zeros(h, dtype=np.float32)
    for i in range(w):
        y1[i, :] = a5 * img_out[i, :] + a6 * tm1 + b1 * ym1 + b2 * ym2
        tm1 = img_out[i, :]
        ym2, ym1 = ym1, y1[i, :]

    tp1 = tp2 = yp1 = yp2 = np.zeros(h, dtype=np.float32)
    for i in reversed(range(w)):
        y2[i, :] = a7 * tp1 + a8 * tp2 + b1 * yp1 + b2 * yp2
        tp2, tp1 = tp1, img_out[i, :]
        yp2, yp1 = yp1, y2[i, :]

    return (c2 * (y1 + y2)).astype(np.float32, copy=False)


def print_array(img_out: np.ndarray, stream: TextIO | None = None) -> None:
    """Dump the output image."""
    with ArrayDump(stream, DATA_TYPE) as dump:
        dump.array("imgOut", img_out)


def run(dataset: Dataset | str = DEFAULT_DATASET) -> np.ndarray:
    """Initialise the data of *dataset* and return the filtered image."""
    w, h = sizes(dataset)
    alpha, img_in = init_array(w, h)
    return kernel_deriche(w, h, alpha, img_in)