"""End-to-end tests for the shopnet command line."""

import json
import os
from pathlib import Path

import pytest

from shopnet.cli import main
from shopnet.config import Config


@pytest.fixture(autouse=True)
def _no_color(monkeypatch):
    monkeypatch.setenv("SHOPNET_NO_COLOR", "1")
    monkeypatch.setattr(Config, "DEBUG", False)


def write_map(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "roads.txt"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3 2\n1 2\n1 3\n", "0"),
        ("5 5\n1 2\n2 3\n3 4\n4 1\n1 5\n", "0"),
        ("6 6\n1 2\n2 3\n3 1\n4 5\n5 6\n6 4\n", "6"),
    ],
)
def test_prints_only_the_result(tmp_path, capsys, text, expected):
    exit_code = main([str(write_map(tmp_path, text))])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == f"{expected}\n"
    assert captured.err == ""


def test_debug_trace_goes_to_stderr(tmp_path, capsys):
    exit_code = main([str(write_map(tmp_path, "3 2\n1 2\n1 3\n")), "--debug"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "0\n"
    assert "1 is connected with 2" in captured.err
    assert "network size: 4" in captured.err
    assert "reducing with threshold value of 2" in captured.err
    assert "source shop with identifier 1 is being instantiated" in captured.err


def test_json_report(tmp_path, capsys):
    exit_code = main([str(write_map(tmp_path, "4 3\n1 2\n2 3\n3 4\n")), "--json"])

    report = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert report["result"] == 2
    assert report["hub_ids"] == [2, 3]
    assert report["threshold"] == 2


def test_warnings_do_not_touch_stdout(tmp_path, capsys):
    exit_code = main([str(write_map(tmp_path, "4 4\n1 2\n2 3\n3 4\n4 5000\n"))])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "2\n"
    assert "warning:" in captured.err
    assert "5000" in captured.err


@pytest.mark.parametrize(
    "text, message",
    [
        ("nonsense\n", "parsing error: couldn't parse header"),
        ("1 1\n1 2\n", "argument error: number of shops"),
        ("2 0\n", "argument error: number of roads"),
        ("3 2\n1 2\n1 ?\n", "parsing error: unexpected char stray"),
    ],
)
def test_fatal_input_errors_exit_nonzero(tmp_path, capsys, text, message):
    exit_code = main([str(write_map(tmp_path, text))])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert message in captured.err


def test_missing_file(tmp_path, capsys):
    exit_code = main([str(tmp_path / "nope.txt")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "io error: file couldn't be opened" in captured.err


def test_every_road_skipped_reports_empty_graph(tmp_path, capsys):
    exit_code = main([str(write_map(tmp_path, "2 1\n0 1\n"))])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "graph error" in captured.err


def test_missing_argument_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_invalid_config_is_reported(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(Config, "MIN_SHOP_ID", 10)
    monkeypatch.setattr(Config, "MAX_SHOP_ID", 5)

    exit_code = main([str(write_map(tmp_path, "3 2\n1 2\n1 3\n"))])

    assert exit_code == 1
    assert "config error" in capsys.readouterr().err


EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("star.txt", "0"),
        ("cycle_with_pendant.txt", "0"),
        ("twin_triangles.txt", "6"),
        ("path_with_bad_road.txt", "2"),
    ],
)
def test_bundled_examples(capsys, name, expected):
    assert main([str(EXAMPLES_DIR / name)]) == 0
    assert capsys.readouterr().out == f"{expected}\n"


def test_non_utf8_file_is_reported(tmp_path, capsys):
    path = tmp_path / "roads.txt"
    path.write_bytes(b"3 2\n1 2\n1 3 \xff\xfe\n")

    exit_code = main([str(path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "io error: file couldn't be read as UTF-8 text" in captured.err


def test_no_color_flag_leaves_environment_alone(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("SHOPNET_NO_COLOR", raising=False)

    exit_code = main([str(write_map(tmp_path, "4 4\n1 2\n2 3\n3 4\n4 5000\n")), "--no-color"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "\033[" not in captured.err
    assert captured.err.startswith("[!] warning:")
    assert "SHOPNET_NO_COLOR" not in os.environ
