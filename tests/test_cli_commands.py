"""Tests for CLI command parsing and output."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from uxguard.cli.decode import run_decode
from uxguard.cli.main import build_parser, main
from uxguard.cli.show import run_show
from uxguard.cli import truncate as truncate_command
from uxguard.cli.truncate import run_truncate
from uxguard.render import strings


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("UXGUARD_TRACE", raising=False)
    monkeypatch.delenv("UXGUARD_SOURCE__KIND", raising=False)
    monkeypatch.delenv("UXGUARD_DISPLAY__MAX_TEXT_LENGTH", raising=False)


def test_decode_command_parsing() -> None:
    parser = build_parser()
    args = parser.parse_args(["decode", "NO_DIALPAD", "--no-optimization"])

    assert args.command == "decode"
    assert args.flags == "NO_DIALPAD"
    assert args.requires_optimization is False
    assert args.func is run_decode


def test_truncate_command_parsing() -> None:
    parser = build_parser()
    args = parser.parse_args(["truncate", "hello", "--max-length", "10"])

    assert args.max_length == 10
    assert args.func is run_truncate


def test_truncate_rejects_tiny_limit() -> None:
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["truncate", "hello", "--max-length", "3"])


def test_show_command_parsing() -> None:
    parser = build_parser()
    args = parser.parse_args(["show", "--script", "drive.json", "--interval", "0"])

    assert args.script == Path("drive.json")
    assert args.interval == 0
    assert args.requires_optimization is None
    assert args.func is run_show


def test_show_sources_are_exclusive() -> None:
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["show", "--flags", "1", "--unavailable"])


def test_no_command_prints_help() -> None:
    assert main([]) == 2


def test_decode_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "NO_DIALPAD|NO_VIDEO|LIMIT_STRING_LENGTH", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == ["call", "video", "limit_string_length"]


def test_decode_without_optimization(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "31", "--no-optimization", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == []


def test_decode_table(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "0x2"]) == 0
    assert "Messaging" in capsys.readouterr().out


def test_decode_unknown_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "NO_RADIO"]) == 1
    err = capsys.readouterr().err
    assert "Unknown restriction flag" in err
    assert "Tip:" in err


def test_truncate_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["truncate", "X" * 51, "--max-length", "50"]) == 0
    assert capsys.readouterr().out.strip() == "X" * 47 + "..."


def test_show_static_flags(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "--flags", "NO_DIALPAD"]) == 0
    out = capsys.readouterr().out
    assert strings.SAFETY_MODE_ACTIVE in out
    assert "• Call" in out


def test_show_flags_without_optimization(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "--flags", "31", "--no-optimization"]) == 0
    assert strings.NO_FUNCTION_BLOCKED in capsys.readouterr().out


def test_show_unavailable(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "--unavailable"]) == 0
    out = capsys.readouterr().out
    assert strings.NO_FUNCTION_BLOCKED in out
    assert "running without restrictions" in out


def test_show_script(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "drive.json"
    script.write_text(
        json.dumps(
            [
                {"active_flags": 0, "requires_optimization": False},
                {"active_flags": "NO_KEYBOARD"},
            ]
        )
    )

    assert main(["show", "--script", str(script), "--interval", "0"]) == 0
    out = capsys.readouterr().out
    assert out.count("Driver screen") == 2
    assert "• Keyboard input" in out


def test_show_missing_script(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "--script", str(tmp_path / "missing.json")]) == 1
    assert "FileNotFoundError" in capsys.readouterr().err


def test_trace_prints_traceback(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--trace", "decode", "NO_RADIO"]) == 1
    captured = capsys.readouterr()
    assert "Traceback" in captured.out
    assert "ValueError" in captured.out
    assert "Tip:" not in captured.err


def test_trace_from_environment(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("UXGUARD_TRACE", "1")
    assert main(["decode", "NO_RADIO"]) == 1
    assert "Traceback" in capsys.readouterr().out


def test_keyboard_interrupt_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupted(args: object) -> int:
        raise KeyboardInterrupt

    monkeypatch.setattr(truncate_command, "run_truncate", interrupted)
    assert main(["truncate", "hello"]) == 130
