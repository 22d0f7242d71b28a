"""End-to-end tests for the command-line pipeline."""

import json
import logging
import runpy
from dataclasses import dataclass
from pathlib import Path

import pytest

from minpath.adapters.graph import DijkstraPathSolver
from minpath.adapters.rendering import TextPathFormatter
from minpath.config import SolverConfig
from minpath.pipeline import (
    EXIT_INPUT_ERROR,
    EXIT_NO_PATH,
    EXIT_OK,
    main,
    solve_and_print,
)
from minpath.services import ShortestPathService


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the pipeline inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _run(workdir, text, capsys, argv=()):
    (workdir / "input.txt").write_text(text, encoding="utf-8")
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out, captured.err


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a b 1\nb z 2\n", ["Located a minimum path of cost: 3", "a (0) -> b (1) -> z (3)"]),
        (
            "a b 10\na c 1\nc z 1\nb z 1\n",
            ["Located a minimum path of cost: 2", "a (0) -> c (1) -> z (2)"],
        ),
        (
            "a b 1\na c 1\nb z 1\nc z 1\n",
            ["Located a minimum path of cost: 2", "a (0) -> b (1) -> z (2)"],
        ),
        ("a z 5\na z 2\na z 7\n", ["Located a minimum path of cost: 2", "a (0) -> z (2)"]),
        (
            "a b 4\na c 2\nc b 1\nb d 5\nc d 8\nd z 3\nc z 10\n",
            [
                "Located a minimum path of cost: 11",
                "a (0) -> c (2) -> b (3) -> d (8) -> z (11)",
            ],
        ),
    ],
)
def test_scenarios_print_cost_and_path(workdir, capsys, text, expected):
    status, out, err = _run(workdir, text, capsys)

    assert status == EXIT_OK
    assert out.splitlines() == expected
    assert err == ""


def test_unreachable_target_reports_no_path(workdir, capsys):
    status, out, err = _run(workdir, "a b 1\nc z 1\n", capsys)

    assert status == EXIT_NO_PATH
    assert out == ""
    assert "There is no path from 'a' to 'z'." in err


def test_missing_endpoints_report_no_path(workdir, capsys):
    status, out, err = _run(workdir, "b c 1\n", capsys)

    assert status == EXIT_NO_PATH
    assert out == ""
    assert err.strip() == "There is no path from 'a' to 'z'."


def test_missing_input_file(workdir, capsys):
    status = main([])
    captured = capsys.readouterr()

    assert status == EXIT_INPUT_ERROR
    assert captured.out == ""
    assert captured.err.startswith("Failed to open 'input.txt': ")


@pytest.mark.parametrize("text", ["a b\n", "a b x\n", "a b 1\n\nb z 1\n", "a b -3\n"])
def test_malformed_input(workdir, capsys, text):
    status, out, err = _run(workdir, text, capsys)

    assert status == EXIT_INPUT_ERROR
    assert out == ""
    assert err.strip() == "Failed to parse input graph"


def test_trailing_blank_lines_are_tolerated(workdir, capsys):
    status, out, _ = _run(workdir, "\na b 1\nb z 2\n\n\n", capsys)

    assert status == EXIT_OK
    assert out.splitlines()[0] == "Located a minimum path of cost: 3"


def test_command_line_overrides(workdir, capsys):
    (workdir / "graph.txt").write_text("s m 2\nm t 2\ns t 9\n", encoding="utf-8")

    status = main(["--input", "graph.txt", "--source", "s", "--target", "t"])
    out = capsys.readouterr().out

    assert status == EXIT_OK
    assert out.splitlines() == [
        "Located a minimum path of cost: 4",
        "s (0) -> m (2) -> t (4)",
    ]


def test_environment_overrides(workdir, capsys, monkeypatch):
    monkeypatch.setenv("MINPATH_SOLVER_TARGET", "d")

    status, out, _ = _run(workdir, "a b 4\na c 2\nc b 1\nb d 5\n", capsys)

    assert status == EXIT_OK
    assert out.splitlines()[1] == "a (0) -> c (2) -> b (3) -> d (8)"


def test_source_equals_target(workdir, capsys):
    status, out, _ = _run(workdir, "a b 1\n", capsys, ["--target", "a"])

    assert status == EXIT_OK
    assert out.splitlines() == ["Located a minimum path of cost: 0", "a (0)"]


def test_structured_debug_logging_goes_to_stderr(workdir, capsys, monkeypatch):
    monkeypatch.setenv("MINPATH_LOG_STRUCTURED", "true")

    status, out, err = _run(workdir, "a z 1\n", capsys, ["--log-level", "DEBUG"])

    assert status == EXIT_OK
    assert out.splitlines()[0] == "Located a minimum path of cost: 1"
    records = [json.loads(line) for line in err.splitlines()]
    loaded = next(r for r in records if r["message"] == "Graph loaded")
    assert loaded["nodes"] == 2
    assert loaded["edges"] == 1
    assert loaded["logger"] == "minpath.adapters.graph.text_repository"


def test_unknown_log_level_from_environment(workdir, capsys, monkeypatch):
    monkeypatch.setenv("MINPATH_LOG_LEVEL", "LOUD")

    status, out, err = _run(workdir, "a z 1\n", capsys)

    assert status == EXIT_INPUT_ERROR
    assert out == ""
    assert "Unknown log level: 'LOUD'" in err


@dataclass
class BrokenGraphRepository:
    error: Exception

    def load(self):
        raise self.error


def test_unexpected_failure_is_logged_with_traceback(capsys, caplog):
    service = ShortestPathService(
        graph_repository=BrokenGraphRepository(RuntimeError("disk on fire")),
        path_solver=DijkstraPathSolver(),
        formatter=TextPathFormatter(),
        config=SolverConfig(),
    )

    with caplog.at_level(logging.ERROR, logger="minpath"):
        status = solve_and_print(service)

    assert status == EXIT_INPUT_ERROR
    assert capsys.readouterr().out == ""
    record = next(r for r in caplog.records if r.getMessage() == "Unexpected failure")
    assert record.levelname == "ERROR"
    assert record.service == "ShortestPathService"
    assert record.exc_info[0] is RuntimeError


def test_start_script_delegates_to_pipeline(monkeypatch):
    import start

    calls = []
    monkeypatch.setattr(start, "run_pipeline", lambda: calls.append(True))

    start.main()

    assert calls == [True]


def test_start_script_runs_as_main(workdir, capsys, monkeypatch):
    (workdir / "input.txt").write_text("a b 1\nb z 2\n", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["start.py"])
    script = Path(__file__).resolve().parents[1] / "start.py"

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_path(str(script), run_name="__main__")

    assert excinfo.value.code == EXIT_OK
    assert capsys.readouterr().out.splitlines() == [
        "Located a minimum path of cost: 3",
        "a (0) -> b (1) -> z (3)",
    ]
