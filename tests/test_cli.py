"""Tests for the keg-tracker command line."""
import io
from unittest.mock import patch

import pytest

from keg_tracker import __version__, cli


class TestMain:
    """Tests for cli.main."""

    def test_runs_menu_until_exit(self, monkeypatch, capsys):
        """Test that main runs the menu against a fresh tracker and returns 0."""
        monkeypatch.setattr("sys.stdin", io.StringIO("1\nLager\n15\nCooler A\n3\n4\n"))

        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert "Keg added successfully!" in out
        assert "1\tLager\t15.0\t15.0\tCooler A" in out
        assert "Exiting..." in out

    def test_end_of_input_exits_cleanly(self, monkeypatch, capsys):
        """Test that empty stdin ends the session with exit code 0."""
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert cli.main([]) == 0
        assert "Exiting..." in capsys.readouterr().out

    def test_unit_option(self, monkeypatch, capsys):
        """Test that --unit changes the label in the prompts."""
        monkeypatch.setattr("sys.stdin", io.StringIO("1\nLager\n50\nCooler A\n4\n"))
        cli.main(["--unit", "liters"])
        assert "Enter keg size (liters): " in capsys.readouterr().out

    def test_each_run_starts_empty(self):
        """Test that every run builds its own empty tracker."""
        with patch.object(cli, "KegShell") as mock_shell:
            mock_shell.return_value.run.return_value = 0
            cli.main([])
            cli.main([])

        first_tracker = mock_shell.call_args_list[0][0][0]
        second_tracker = mock_shell.call_args_list[1][0][0]
        assert first_tracker is not second_tracker
        assert len(first_tracker) == 0

    def test_version(self, capsys):
        """Test that --version prints the package version and exits 0."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
