"""Tests for the ``ksortable`` command (cli/app.py, cli/render.py).

Coverage:
* Routing of every sub-command through :func:`main`.
* Output formats.
* The :func:`cli` error boundary and its exit codes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from conftest import FIXED_PAYLOAD, FIXED_RAW, FIXED_STRING, FIXED_TIME
from ksortable.cli import exit_codes
from ksortable.cli.app import cli, main
from ksortable.cli.render import render_line
from ksortable.core.models import Ksuid
from ksortable.exceptions import InvalidKsuidStringError, InvalidPayloadLengthError
from ksortable.utils.constants import MAX_STRING, MIN_STRING


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    package_logger = logging.getLogger("ksortable")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)


def _stdout_lines(capsys: pytest.CaptureFixture[str]) -> list[str]:
    return capsys.readouterr().out.splitlines()


# ---------------------------------------------------------------------------
# Top-level routing
# ---------------------------------------------------------------------------

class TestRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: ksortable" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_command_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["explode"])
        assert exc_info.value.code == 2

    def test_verbose_enables_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["-v", "new"])
        assert logging.getLogger("ksortable").level == logging.DEBUG


# ---------------------------------------------------------------------------
# new
# ---------------------------------------------------------------------------

class TestNew:
    def test_default_prints_one_string(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["new"]) == exit_codes.SUCCESS
        lines = _stdout_lines(capsys)
        assert len(lines) == 1
        assert Ksuid.parse(lines[0])

    def test_count(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["new", "-n", "5"])
        lines = _stdout_lines(capsys)
        assert len(lines) == 5
        assert len(set(lines)) == 5

    def test_count_must_be_positive(self) -> None:
        with pytest.raises(SystemExit):
            main(["new", "-n", "0"])

    def test_explicit_components(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["new", "-t", str(FIXED_TIME), "-p", FIXED_PAYLOAD.hex()])
        assert _stdout_lines(capsys) == [FIXED_STRING]

    def test_zero_payload_is_honoured(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["new", "-t", "1400000000", "-p", "00" * 16])
        assert _stdout_lines(capsys) == [MIN_STRING]

    def test_bad_hex_payload(self) -> None:
        with pytest.raises(InvalidPayloadLengthError, match="hexadecimal"):
            main(["new", "-p", "not-hex"])

    def test_short_payload(self) -> None:
        with pytest.raises(InvalidPayloadLengthError, match="16 bytes"):
            main(["new", "-p", "abcd"])

    @pytest.mark.parametrize(
        ("fmt", "expected"),
        [
            ("timestamp", str(FIXED_TIME)),
            ("time", "2017-10-10T04:00:47+00:00"),
            ("payload", FIXED_PAYLOAD.hex().upper()),
            ("raw", FIXED_RAW.hex().upper()),
            ("string", FIXED_STRING),
        ],
    )
    def test_formats(
        self, capsys: pytest.CaptureFixture[str], fmt: str, expected: str
    ) -> None:
        main(["new", "-t", str(FIXED_TIME), "-p", FIXED_PAYLOAD.hex(), "-f", fmt])
        assert _stdout_lines(capsys) == [expected]

    def test_inspect_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["new", "-t", str(FIXED_TIME), "-p", FIXED_PAYLOAD.hex(), "-f", "inspect"])
        out = capsys.readouterr().out
        assert FIXED_STRING in out
        assert FIXED_PAYLOAD.hex().upper() in out


# ---------------------------------------------------------------------------
# inspect / next / prev
# ---------------------------------------------------------------------------

class TestInspect:
    def test_shows_components(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["inspect", FIXED_STRING]) == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert FIXED_RAW.hex().upper() in out
        assert str(FIXED_TIME) in out
        assert "2017-10-10T04:00:47+00:00" in out

    def test_multiple(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["inspect", MIN_STRING, MAX_STRING])
        out = capsys.readouterr().out
        assert MIN_STRING in out
        assert MAX_STRING in out

    def test_invalid(self) -> None:
        with pytest.raises(InvalidKsuidStringError):
            main(["inspect", "bogus"])


class TestStep:
    def test_next(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["next", MIN_STRING])
        assert _stdout_lines(capsys) == ["0" * 26 + "1"]

    def test_prev(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["prev", MAX_STRING])
        assert _stdout_lines(capsys) == [MAX_STRING[:-1] + "U"]

    def test_next_with_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["next", FIXED_STRING, "-f", "timestamp"])
        assert _stdout_lines(capsys) == [str(FIXED_TIME)]


class TestRenderLine:
    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unknown format"):
            render_line(Ksuid.parse(FIXED_STRING), "inspect")


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run(self, monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
        monkeypatch.setattr("sys.argv", ["ksortable", *argv])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return exc_info.value.code  # type: ignore[return-value]

    def test_success(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert self._run(monkeypatch, "new") == exit_codes.SUCCESS

    def test_known_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert self._run(monkeypatch, "next", "bogus") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Expected a string KSUID" in err
        assert "Hint:" in err

    def test_boundary_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert self._run(monkeypatch, "next", MAX_STRING) == exit_codes.GENERAL_ERROR
        assert "Timestamp must be between" in capsys.readouterr().err

    def test_keyboard_interrupt(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr("ksortable.cli.app.main", _interrupt)
        assert self._run(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def _boom(argv: list[str] | None = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr("ksortable.cli.app.main", _boom)
        assert self._run(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err
