import logging

import pytest

from interpolation import cli
from interpolation.ease import EASING_FUNCTIONS


@pytest.fixture
def run_cli(tmp_path):
    log_file = tmp_path / "interp.log"

    def run(*args):
        return cli.main(["--log-file", str(log_file), *args])

    yield run, log_file
    for handler in list(cli.logger.handlers):
        if isinstance(handler, logging.FileHandler):
            handler.close()
            cli.logger.removeHandler(handler)


def test_list_prints_every_name(run_cli, capsys):
    run, _ = run_cli
    assert run("list") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == list(EASING_FUNCTIONS)
    assert len(lines) == 30


def test_table_samples_curve(run_cli, capsys):
    run, log_file = run_cli
    assert run("table", "quadratic-in", "--steps", "4") == 0
    rows = [line.split("\t") for line in capsys.readouterr().out.splitlines()]
    assert [r[0] for r in rows] == ["0.0000", "0.2500", "0.5000", "0.7500", "1.0000"]
    assert rows[2][1] == "0.250000"
    assert "Sampled quadratic-in" in log_file.read_text(encoding="utf-8")


def test_table_float32(run_cli, capsys):
    run, _ = run_cli
    assert run("table", "cubic_out", "--steps", "2", "--dtype", "float32") == 0
    rows = capsys.readouterr().out.splitlines()
    assert rows[-1] == "1.0000\t1.000000"


def test_unknown_easing_exits_with_error(run_cli, capsys):
    run, log_file = run_cli
    assert run("table", "wobble") == 1
    assert "Unknown easing 'wobble'" in capsys.readouterr().err
    assert "ERROR" in log_file.read_text(encoding="utf-8")


def test_bench_reports_each_name(run_cli, capsys):
    run, _ = run_cli
    assert run("bench", "sine-in", "bounce-out", "--iterations", "5") == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("sine-in")
    assert lines[1].endswith("ns/call")


def test_missing_command_is_usage_error(run_cli):
    run, _ = run_cli
    with pytest.raises(SystemExit) as exc:
        run()
    assert exc.value.code == 2


def test_sample_curve_helper():
    pairs = cli.sample_curve("bounce-in-out", steps=2)
    assert [p for p, _ in pairs] == [0.0, 0.5, 1.0]
    assert pairs[1][1] == pytest.approx(0.5)


def test_bench_ease_returns_positive_time():
    assert cli.bench_ease("elastic-in-out", iterations=3) > 0
