# tests/integration/test_cli_run.py
# Integration tests for the zzz command: output, exit codes & friendly error messages

import re

import pytest
from typer.testing import CliRunner
from unittest.mock import patch

from zzz import __version__
from zzz.cli.app import app
from zzz.config.settings import ZzzSettings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def sleeper(fake_clock, make_sleeper):
    # ! keep every run on the fake clock so nothing sleeps for real
    fake = make_sleeper()
    with patch("zzz.cli.runner.MonotonicClock", return_value=fake_clock), patch(
        "zzz.cli.runner.InterruptibleSleeper", return_value=fake
    ):
        yield fake


# status lines look like "1h 0m 5s"; diagnostics may share the captured stream
_STATUS_RE = re.compile(r"^(?:\d+[dhm] )*\d+s$")


# * Status lines written to stdout, ignoring any diagnostics
def _status_lines(result):
    return [line for line in result.stdout.splitlines() if _STATUS_RE.match(line)]


# * Test summed units count down one line per second
def test_hour_minute_second_countdown(runner, sleeper):
    result = runner.invoke(app, ["1h", "1m", "1s"])

    assert result.exit_code == 0
    lines = _status_lines(result)
    assert len(lines) == 3662
    assert lines[0] == "1h 1m 1s"
    assert lines[-1] == "0s"
    assert "\033" not in result.stdout


# * Test --up counts forward to the total
def test_count_up(runner, sleeper):
    result = runner.invoke(app, ["3661", "--up"])

    assert result.exit_code == 0
    lines = _status_lines(result)
    assert len(lines) == 3662
    assert lines[0] == "0s"
    assert lines[-1] == "1h 1m 1s"


# * Test zero duration renders once & never sleeps
def test_zero_duration(runner, sleeper):
    result = runner.invoke(app, ["0"])

    assert result.exit_code == 0
    assert _status_lines(result) == ["0s"]
    assert sleeper.calls == []


# * Test --bell writes a single BEL after the countdown
def test_bell(runner, sleeper):
    result = runner.invoke(app, ["1", "--bell"])

    assert result.exit_code == 0
    assert result.stdout == "1s\n0s\n\a"


# * Test settings injected via ctx.obj supply defaults
def test_settings_from_context(runner, sleeper):
    result = runner.invoke(app, ["2"], obj=ZzzSettings(count_up=True, bell=True))

    assert result.exit_code == 0
    assert result.stdout == "0s\n1s\n2s\n\a"


# * Test command-line flags override settings
def test_flags_override_settings(runner, sleeper):
    result = runner.invoke(
        app, ["1", "--down", "--no-bell"], obj=ZzzSettings(count_up=True, bell=True)
    )

    assert result.exit_code == 0
    assert result.stdout == "1s\n0s\n"


# * Test environment settings are honoured
def test_settings_from_environment(runner, sleeper, monkeypatch):
    monkeypatch.setenv("ZZZ_COUNT_UP", "1")
    result = runner.invoke(app, ["1"])

    assert result.exit_code == 0
    assert result.stdout == "0s\n1s\n"


# * Test invalid environment settings → exit 1 w/ configuration error
def test_bad_environment_setting(runner, sleeper, monkeypatch):
    monkeypatch.setenv("ZZZ_OVERFLOW_POLICY", "wrap")
    result = runner.invoke(app, ["1"])

    assert result.exit_code == 1
    assert "Configuration Error" in result.output


# * Test missing argument → exit code 2 (Click/Typer standard)
def test_missing_argument(runner, sleeper):
    result = runner.invoke(app, [])

    assert result.exit_code == 2
    assert sleeper.calls == []


# * Test bad suffix → exit 1 w/ friendly message
def test_invalid_suffix(runner, sleeper):
    result = runner.invoke(app, ["5x"])

    assert result.exit_code == 1
    assert "Duration Error" in result.output
    assert "invalid suffix" in result.output
    assert sleeper.calls == []


# * Test non-numeric argument → exit 1
def test_not_a_number(runner, sleeper):
    result = runner.invoke(app, ["abc"])

    assert result.exit_code == 1
    assert "does not start with number" in result.output


# * Test a negative number reaches the parser rather than the option parser
@pytest.mark.parametrize("args", [["-5"], ["1m", "-30s"]])
def test_negative_argument(runner, sleeper, args):
    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert "Duration Error" in result.output
    assert "does not start with number" in result.output
    assert "No such option" not in result.output
    assert sleeper.calls == []


# * Test oversized duration is rejected by default
def test_overflow_rejected(runner, sleeper):
    result = runner.invoke(app, ["25000d"])

    assert result.exit_code == 1
    assert "insane" in result.output
    assert sleeper.calls == []


# * Test --overflow clamp clamps & warns
def test_overflow_clamped(runner, sleeper):
    result = runner.invoke(
        app, ["2m", "--overflow", "clamp"], obj=ZzzSettings(max_seconds=2)
    )

    assert result.exit_code == 0
    assert "clamping" in result.output
    assert _status_lines(result) == ["2s", "1s", "0s"]


# * Test --quiet hides the clamp warning
def test_quiet_hides_warning(runner, sleeper):
    result = runner.invoke(
        app,
        ["2m", "--overflow", "clamp", "--quiet"],
        obj=ZzzSettings(max_seconds=1),
    )

    assert result.exit_code == 0
    assert "clamping" not in result.output


# * Test -vv logs stages & ticks
def test_debug_logging(runner, sleeper):
    result = runner.invoke(app, ["2", "-vv"])

    assert result.exit_code == 0
    assert "[CONFIG]" in result.output
    assert "interactive = False" in result.output
    assert "[TICK]" in result.output


# * Test --log-file writes a session log
def test_log_file(runner, sleeper, tmp_path):
    log_file = tmp_path / "zzz.log"
    result = runner.invoke(app, ["1", "--log-file", str(log_file)])

    assert result.exit_code == 0
    content = log_file.read_text(encoding="utf-8")
    assert "Session Started" in content
    assert "[STAGE] Countdown" in content
    assert "Session Ended" in content


# * Test --version prints the version & exits 0
def test_version(runner):
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"zzz {__version__}" in result.output


# * Test --help lists the unit suffixes
def test_help(runner):
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "minutes" in result.output
    assert "--overflow" in result.output
    assert "Display" in result.output
    assert "Logging" in result.output
