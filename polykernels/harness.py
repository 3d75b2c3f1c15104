"""Shared benchmark harness: dataset sizes, timing, cache flushing, allocation."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

DEFAULT_CACHE_SIZE_KB = 32770
"""Size of the buffer swept by :func:`flush_cache`, in KiB (32+ MiB)."""

_FLOPS_WARNING = (
    "[PolyBench][WARNING] Program flops not defined, "
    "use polybench_set_program_flops(value)\n"
)


class Dataset(enum.Enum):
    """Problem-size class of a benchmark run."""

    MINI = "mini"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRALARGE = "extralarge"

    @classmethod
    def parse(cls, name: str | "Dataset") -> "Dataset":
        """Return the dataset named by *name*, e.g. ``"small"`` or ``"SMALL_DATASET"``."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper()
        if key.endswith("_DATASET"):
            key = key[: -len("_DATASET")]
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(member.name for member in cls)
            raise ValueError(
                f"unknown dataset {name!r}; expected one of {choices}"
            ) from None


DEFAULT_DATASET = Dataset.LARGE
"""Dataset used when none is chosen."""


def flush_cache(cache_size_kb: int = DEFAULT_CACHE_SIZE_KB) -> float:
    """Sweep a zeroed buffer larger than the last-level cache and return its sum."""
    if cache_size_kb < 0:
        raise ValueError("cache size must not be negative")
    count = cache_size_kb * 1024 // np.dtype(np.float64).itemsize
    total = float(np.zeros(count, dtype=np.float64).sum())
    if total > 10.0:
        raise AssertionError("cache flush buffer was not zeroed")
    return total


def prepare_instruments(flush: bool = True) -> None:
    """Put the machine in a known state before measuring."""
    if flush:
        flush_cache()


def alloc_array(
    shape: int | Iterable[int],
    dtype: np.dtype | type = np.float64,
    padding: int = 0,
) -> np.ndarray:
    """Allocate a zeroed array whose every dimension is grown by *padding*."""
    dims = (shape,) if isinstance(shape, int) else tuple(shape)
    if padding < 0:
        raise ValueError("padding must not be negative")
    padded = tuple(int(d) + padding for d in dims)
    if any(d < 0 for d in padded):
        raise ValueError(f"invalid array shape {dims!r}")
    return np.zeros(padded, dtype=dtype)


@dataclass
class Timer:
    """Wall-clock timer around a kernel run."""

    flush: bool = True
    _start: float | None = field(default=None, init=False, repr=False)
    _end: float | None = field(default=None, init=False, repr=False)

    def start(self) -> None:
        """Prepare the instruments and record the start time."""
        prepare_instruments(self.flush)
        self._end = None
        self._start = time.perf_counter()

    def stop(self) -> None:
        """Record the end time."""
        if self._start is None:
            raise RuntimeError("timer was not started")
        self._end = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds between start and stop."""
        if self._start is None or self._end is None:
            raise RuntimeError("timer has not been started and stopped")
        return self._end - self._start

    def report(self, total_flops: float | None = None) -> str:
        """Format the measurement: seconds, or GFLOP/s when *total_flops* is given."""
        seconds = self.elapsed()
        if total_flops is None:
            return f"{seconds:0.6f}\n"
        if total_flops == 0:
            return _FLOPS_WARNING + f"{seconds:0.6f}\n"
        return f"{(total_flops / seconds) / 1_000_000_000:0.2f}\n"

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()