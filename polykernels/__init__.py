"""Polyhedral benchmark kernels in NumPy with a timing and array-dump harness."""

__version__ = "0.1.0"

__all__ = [
    "adi",
    "cli",
    "deriche",
    "dump",
    "fdtd_2d",
    "floyd_warshall",
    "harness",
    "heat_3d",
    "jacobi_1d",
    "jacobi_2d",
    "nussinov",
    "seidel_2d",
]