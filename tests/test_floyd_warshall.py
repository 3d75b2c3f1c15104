import io

import numpy as np
import pytest

from polykernels.dump import DUMP_FINISH, DUMP_START
from polykernels.floyd_warshall import (
    UNREACHABLE,
    init_array,
    kernel_floyd_warshall,
    print_array,
    run,
    sizes,
)
from polykernels.harness import Dataset


def test_sizes_follow_dataset():
    assert sizes("mini").n == 60
    assert sizes(Dataset.LARGE) == (2800,)
    assert sizes("EXTRALARGE_DATASET").n == 5600


def test_unknown_dataset_rejected():
    with pytest.raises(ValueError):
        sizes("huge")


def test_init_marks_unreachable_edges():
    path = init_array(30)
    assert path.shape == (30, 30)
    assert path[0, 0] == UNREACHABLE
    assert path[3, 4] == UNREACHABLE
    reachable = path[path != UNREACHABLE]
    assert reachable.min() >= 1
    assert reachable.max() <= 7


def test_init_is_symmetric():
    path = init_array(40)
    assert np.array_equal(path, path.T)


def test_kernel_never_increases_distances():
    original = init_array(25)
    result = kernel_floyd_warshall(25, original.copy())
    assert np.count_nonzero(result > original) == 0


def test_kernel_result_satisfies_triangle_inequality():
    result = kernel_floyd_warshall(25, init_array(25))
    for k in range(25):
        via_k = result[:, k : k + 1] + result[k : k + 1, :]
        assert np.count_nonzero(result > via_k) == 0


def test_kernel_is_idempotent():
    once = kernel_floyd_warshall(20, init_array(20))
    twice = kernel_floyd_warshall(20, once.copy())
    assert np.array_equal(once, twice)


def test_kernel_works_in_place():
    path = init_array(10)
    result = kernel_floyd_warshall(10, path)
    assert result is path


def test_small_graph_shortcut():
    path = np.array([[0, 4, 1], [4, 0, 1], [1, 1, 0]], dtype=np.int32)
    result = kernel_floyd_warshall(3, path)
    assert result[0, 1] == 2
    assert np.array_equal(result, result.T)


def test_kernel_leaves_outside_block_alone():
    path = np.full((4, 4), 50, dtype=np.int32)
    path[:3, :3] = init_array(3)
    result = kernel_floyd_warshall(3, path)
    assert result[3, :].tolist() == [50, 50, 50, 50]
    assert result[:, 3].tolist() == [50, 50, 50, 50]


def test_run_matches_kernel_on_initial_data():
    n = sizes("mini").n
    assert np.array_equal(run("mini"), kernel_floyd_warshall(n, init_array(n)))


def test_print_array_round_trip():
    path = kernel_floyd_warshall(5, init_array(5))
    out = io.StringIO()
    print_array(path, out)
    text = out.getvalue()
    assert text.startswith(DUMP_START)
    assert text.endswith(DUMP_FINISH)
    body = text.split("begin dump: path", 1)[1].split("end   dump: path", 1)[0]
    values = [int(token) for token in body.split()]
    assert values == path.ravel().tolist()