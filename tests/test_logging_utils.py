"""Tests for colored diagnostics and the Diagnostics sink."""

import io

from shopnet.logging_utils import (
    Color,
    Diagnostics,
    colored,
    log_debug,
    log_error,
    log_warning,
)


def test_colored_wraps_text(monkeypatch):
    monkeypatch.delenv("SHOPNET_NO_COLOR", raising=False)

    text = colored("hubs", Color.GREEN, bold=True)
    assert text.startswith(Color.BOLD.value + Color.GREEN.value)
    assert text.endswith(Color.RESET.value)
    assert "hubs" in text


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.setenv("SHOPNET_NO_COLOR", "1")
    assert colored("hubs", Color.RED) == "hubs"


def test_log_helpers_default_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("SHOPNET_NO_COLOR", "1")

    log_debug("trace")
    log_warning("careful")
    log_error("broken")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == ["[•] trace", "[!] warning: careful", "[x] broken"]


def test_diagnostics_only_traces_when_enabled(monkeypatch):
    monkeypatch.setenv("SHOPNET_NO_COLOR", "1")
    quiet_stream = io.StringIO()
    loud_stream = io.StringIO()

    quiet = Diagnostics(stream=quiet_stream)
    loud = Diagnostics(enabled=True, stream=loud_stream)
    for sink in (quiet, loud):
        sink.trace("dump")
        sink.info("meta")
        sink.success("done")
        sink.warn("skipped")

    assert quiet_stream.getvalue().splitlines() == ["[!] warning: skipped"]
    assert loud_stream.getvalue().splitlines() == [
        "[•] dump",
        "[i] meta",
        "[✓] done",
        "[!] warning: skipped",
    ]


def test_diagnostics_color_switch_overrides_terminal_colors(monkeypatch):
    monkeypatch.delenv("SHOPNET_NO_COLOR", raising=False)
    plain_stream = io.StringIO()
    colored_stream = io.StringIO()

    Diagnostics(stream=plain_stream, color=False).warn("skipped")
    Diagnostics(stream=colored_stream).warn("skipped")

    assert plain_stream.getvalue() == "[!] warning: skipped\n"
    assert colored_stream.getvalue().startswith(Color.YELLOW.value)


def test_colored_disabled_by_caller():
    assert colored("hubs", Color.CYAN, enabled=False) == "hubs"
