"""End-to-end tests for the console desk."""

import pytest

from hms import cli


def feed_input(monkeypatch, *lines):
    """Replace input() with a queue of lines; EOF when exhausted."""
    queue = list(lines)

    def fake_input(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return queue


class TestMenu:
    """Tests for the selection menu."""

    def test_menu_lists_patient_types(self, monkeypatch, capsys):
        feed_input(monkeypatch, "9", "")

        cli.main([])

        out = capsys.readouterr().out
        assert "=== Patient Management System ===" in out
        assert "1. InPatient" in out
        assert "2. OutPatient" in out
        assert "3. Emergency Patient" in out


class TestScenarios:
    """One admission per run, selected at the menu."""

    def test_inpatient(self, monkeypatch, capsys):
        """Selection 1 admits John with insurance: 4200."""
        feed_input(monkeypatch, "1", "")

        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert "Patient Name : John" in out
        assert "Final Bill   : 4200\n" in out
        assert out.count("[NOTIFICATION] Patient John admitted successfully.") == 1

    def test_outpatient(self, monkeypatch, capsys):
        """Selection 2 admits Alice with regular billing: 500."""
        feed_input(monkeypatch, "2", "")

        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert "Patient Name : Alice" in out
        assert "Final Bill   : 500\n" in out
        assert "[NOTIFICATION] Patient Alice admitted successfully." in out

    def test_emergency(self, monkeypatch, capsys):
        """Selection 3 admits Mark with emergency billing: 6000."""
        feed_input(monkeypatch, "3", "")

        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert "Patient Name : Mark" in out
        assert "Final Bill   : 6000\n" in out
        assert "[NOTIFICATION] Patient Mark admitted successfully." in out

    def test_invalid_choice(self, monkeypatch, capsys):
        """Unknown selections print Invalid choice and admit nobody."""
        feed_input(monkeypatch, "9", "")

        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert "Invalid choice" in out
        assert "BILL DETAILS" not in out
        assert "[NOTIFICATION]" not in out

    def test_selection_with_whitespace(self, monkeypatch, capsys):
        """Surrounding whitespace is accepted, as int() allows."""
        feed_input(monkeypatch, " 2 ", "")

        cli.main([])

        assert "Patient Name : Alice" in capsys.readouterr().out


class TestInputHandling:
    """Tests for the pause line and malformed input."""

    def test_waits_for_final_line(self, monkeypatch):
        """The pause consumes one more line before exit."""
        queue = feed_input(monkeypatch, "2", "", "left over")

        cli.main([])

        assert queue == ["left over"]

    def test_eof_at_pause_exits_cleanly(self, monkeypatch):
        """Closing stdin at the pause still exits with 0."""
        feed_input(monkeypatch, "1")

        assert cli.main([]) == 0

    def test_non_numeric_input_is_fatal(self, monkeypatch, capsys):
        """Non-numeric selections are not handled."""
        feed_input(monkeypatch, "abc", "")

        with pytest.raises(ValueError):
            cli.main([])

        assert "BILL DETAILS" not in capsys.readouterr().out


class TestArguments:
    """Tests for command-line options."""

    def test_defaults(self):
        args = cli.parse_args([])

        assert args.log_level == "WARNING"
        assert args.isolate_handlers is False

    def test_isolate_handlers(self):
        args = cli.parse_args(["--isolate-handlers", "--log-level", "DEBUG"])

        assert args.isolate_handlers is True
        assert args.log_level == "DEBUG"


class TestDeskConfiguration:
    """Tests for options reaching the desk built by main."""

    @pytest.fixture
    def built_desks(self, monkeypatch):
        """Record every AdmissionDesk that main constructs."""
        desks = []
        real_desk = cli.AdmissionDesk

        def recording_desk(config):
            desk = real_desk(config)
            desks.append(desk)
            return desk

        monkeypatch.setattr(cli, "AdmissionDesk", recording_desk)
        return desks

    def test_isolate_handlers_enables_fail_open(self, monkeypatch, built_desks):
        """--isolate-handlers builds a fail-open notification channel."""
        feed_input(monkeypatch, "2", "")

        assert cli.main(["--isolate-handlers"]) == 0

        assert len(built_desks) == 1
        assert built_desks[0].notifications.config.fail_open is True

    def test_default_channel_is_not_fail_open(self, monkeypatch, built_desks):
        """Without the option, handler failures abort the publish."""
        feed_input(monkeypatch, "2", "")

        cli.main([])

        assert built_desks[0].notifications.config.fail_open is False
