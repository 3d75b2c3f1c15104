import io

import numpy as np
import pytest

from polykernels import seidel_2d
from polykernels.dump import DUMP_FINISH, DUMP_START


def test_sizes():
    assert seidel_2d.sizes("mini") == (20, 40)
    assert seidel_2d.sizes("EXTRALARGE_DATASET") == (1000, 4000)


def test_init_array_shape_and_first_row():
    a = seidel_2d.init_array(9)
    assert a.shape == (9, 9)
    assert np.allclose(a[0], 2 / 9)


def test_zero_steps_unchanged():
    a = seidel_2d.init_array(6)
    before = a.copy()
    assert np.array_equal(seidel_2d.kernel_seidel_2d(0, 6, a), before)


def test_single_impulse_small_grid():
    a = np.zeros((3, 3))
    a[1, 1] = 9.0
    seidel_2d.kernel_seidel_2d(1, 3, a)
    assert a[1, 1] == pytest.approx(1.0)


def test_updates_use_new_values():
    a = np.zeros((4, 4))
    a[1, 1] = 9.0
    seidel_2d.kernel_seidel_2d(1, 4, a)
    # a[1, 2] sees the already-updated a[1, 1], not the original 9.
    assert a[1, 2] == pytest.approx(a[1, 1] / 9.0)


def test_constant_field_and_fixed_boundaries():
    n = 7
    a = np.full((n, n), 4.5)
    assert np.allclose(seidel_2d.kernel_seidel_2d(3, n, a), 4.5)

    a = seidel_2d.init_array(n)
    top, bottom = a[0].copy(), a[-1].copy()
    left, right = a[:, 0].copy(), a[:, -1].copy()
    out = seidel_2d.kernel_seidel_2d(2, n, a)
    assert np.array_equal(out[0], top)
    assert np.array_equal(out[-1], bottom)
    assert np.array_equal(out[:, 0], left)
    assert np.array_equal(out[:, -1], right)


def test_in_place_and_run():
    a = seidel_2d.init_array(5)
    assert seidel_2d.kernel_seidel_2d(1, 5, a) is a
    out = seidel_2d.run("mini")
    assert out.shape == (40, 40)
    assert np.isfinite(out).all()


def test_print_array_format():
    buf = io.StringIO()
    seidel_2d.print_array(np.ones((2, 3)), buf)
    text = buf.getvalue()
    assert text.startswith(DUMP_START + "begin dump: A\n")
    assert text.endswith(DUMP_FINISH)
    assert text.count("1.00 ") == 6