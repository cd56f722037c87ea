"""Tests for CLI exception handling."""
from click.testing import CliRunner
from unittest.mock import patch
from stylecheck.cli import main


def test_keyboard_interrupt_exits_with_130():
    """Test that KeyboardInterrupt exits with code 130 (SIGINT)."""
    runner = CliRunner()

    with patch("stylecheck.cli.run_checks") as mock_run:
        mock_run.side_effect = KeyboardInterrupt()

        result = runner.invoke(main, [])

        assert result.exit_code == 130
        assert "cancelled" in result.output.lower()


def test_runtime_error_shows_error_message():
    """Test that a git timeout shows its message."""
    runner = CliRunner()

    with patch("stylecheck.cli.run_checks") as mock_run:
        mock_run.side_effect = RuntimeError("Git command timed out after 30s")

        result = runner.invoke(main, [])

        assert result.exit_code == 2
        assert "Git command timed out" in result.output


def test_invalid_config_shows_error_message():
    """Test that a broken config file is reported."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        with open(".stylecheck.json", "w") as f:
            f.write("{broken")

        result = runner.invoke(main, [])

    assert result.exit_code == 2
    assert "Invalid JSON" in result.output


def test_generic_exception_shows_helpful_message():
    """Test that unexpected exceptions show helpful message."""
    runner = CliRunner()

    with patch("stylecheck.cli.run_checks") as mock_run:
        mock_run.side_effect = TypeError("Unexpected internal error")

        result = runner.invoke(main, ["--verbose"])

        assert result.exit_code == 2
        assert "unexpected error" in result.output.lower()
