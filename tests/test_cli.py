import io
import re

import pytest

from polykernels import cli, floyd_warshall, jacobi_2d
from polykernels.dump import DUMP_FINISH, DUMP_START


def test_available_benchmarks_sorted_and_complete():
    names = cli.available_benchmarks()
    assert names == sorted(names)
    assert {"deriche", "floyd-warshall", "nussinov", "adi", "fdtd-2d",
            "heat-3d", "jacobi-1d", "jacobi-2d", "seidel-2d"} == set(names)


def test_run_without_timing_or_dump_returns_none_and_writes_nothing():
    out = io.StringIO()
    err = io.StringIO()
    result = cli.run_benchmark("jacobi-1d", "mini", stream=out, dump_stream=err)
    assert result is None
    assert out.getvalue() == "" and err.getvalue() == ""


def test_timed_run_reports_seconds():
    out = io.StringIO()
    report = cli.run_benchmark("jacobi-1d", "mini", timed=True, stream=out)
    assert re.fullmatch(r"\d+\.\d{6}\n", report)
    assert out.getvalue() == report


def test_dump_matches_module_output():
    got = io.StringIO()
    cli.run_benchmark("jacobi-2d", "mini", dump=True, dump_stream=got)
    expected = io.StringIO()
    jacobi_2d.print_array(jacobi_2d.run("mini"), expected)
    assert got.getvalue() == expected.getvalue()
    assert got.getvalue().startswith(DUMP_START)
    assert got.getvalue().endswith(DUMP_FINISH)


def test_underscore_name_accepted():
    got = io.StringIO()
    cli.run_benchmark("floyd_warshall", "MINI", dump=True, dump_stream=got)
    expected = io.StringIO()
    floyd_warshall.print_array(floyd_warshall.run("mini"), expected)
    assert got.getvalue() == expected.getvalue()


def test_unknown_benchmark_raises():
    with pytest.raises(KeyError):
        cli.run_benchmark("no-such-kernel", "mini")


def test_unknown_dataset_raises():
    with pytest.raises(ValueError):
        cli.run_benchmark("adi", "gigantic")


def test_main_list(capsys):
    assert cli.main(["--list"]) == 0
    lines = capsys.readouterr().out.split()
    assert lines == cli.available_benchmarks()


def test_main_runs_with_timing(capsys):
    assert cli.main(["-d", "mini", "-t", "nussinov"]) == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"\d+\.\d{6}\n", out)


def test_main_dump_goes_to_stderr(capsys):
    assert cli.main(["--dataset", "mini", "--dump", "seidel-2d"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(DUMP_START + "begin dump: A")


def test_main_rejects_bad_input():
    with pytest.raises(SystemExit):
        cli.main(["bogus"])
    with pytest.raises(SystemExit):
        cli.main(["-d", "huge", "adi"])
    with pytest.raises(SystemExit):
        cli.main([])