"""Tests for CLI functionality."""

from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from apps.cli.main import app, ask_yes_no, format_summary
from core.errors import CommandError, PromptError
from core.models import EnvironmentUpdate, LocalVersion, SemanticVersion, UpgradeSummary
from core.pyenv import PyenvClient


class TestCLI:
    """Test CLI command interface."""

    def setup_method(self):
        """Setup test fixtures."""
        self.runner = CliRunner()

    def invoke(self, fake_runner, input=None, args=None):
        """Invoke the app with every external command routed to fake_runner."""
        def make_client(settings):
            return PyenvClient(settings, runner=fake_runner)

        with patch("apps.cli.main.PyenvClient", side_effect=make_client):
            return self.runner.invoke(app, args or [], input=input)

    def test_cli_help_command(self):
        """Should display help when called with --help."""
        result = self.runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "upgrade" in result.output.lower()
        assert "--version" in result.output

    def test_version(self):
        """Should print the version and exit without touching pyenv."""
        with patch("apps.cli.main.PyenvClient") as mock_client:
            result = self.runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("pyenv-upgrade ")
        mock_client.assert_not_called()

    def test_decline_all(self, fake_runner):
        """Should exit 0 and run only the listing commands when everything is declined."""
        fake_runner.outputs[("pyenv", "versions")] = "* 3.9.1\n  3.9.1/envs/a\n"
        fake_runner.outputs[("pyenv", "install", "--list")] = "3.9.5\n"

        result = self.invoke(fake_runner, input="n\n")

        assert result.exit_code == 0
        assert "Install 3.9.5?" in result.output
        assert "Nothing upgraded" in result.output
        assert fake_runner.call_count == 2

    def test_accept_all(self, fake_runner):
        """Should install and update when every prompt is accepted."""
        fake_runner.outputs[("pyenv", "versions")] = "* 3.9.1\n  3.9.1/envs/a\n"
        fake_runner.outputs[("pyenv", "install", "--list")] = "3.9.5\n"

        result = self.invoke(fake_runner, input="y\ny\n")

        assert result.exit_code == 0
        assert "Update 3.9.1/envs/a to 3.9.5?" in result.output
        assert "Installed 3.9.5" in result.output
        assert "Updated a to 3.9.5" in result.output
        assert fake_runner.call_count == 8

    def test_closed_stdin_is_fatal(self, fake_runner):
        """Should exit nonzero when the answer cannot be read."""
        fake_runner.outputs[("pyenv", "versions")] = "* 3.9.1\n"
        fake_runner.outputs[("pyenv", "install", "--list")] = "3.9.5\n"

        result = self.invoke(fake_runner, input="")

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert fake_runner.call_count == 2

    def test_command_failure_exit_code(self):
        """Should report the failing command and exit 1."""
        failing = MagicMock(side_effect=CommandError(["pyenv", "versions"], 127))

        result = self.invoke(failing)

        assert result.exit_code == 1
        assert "pyenv versions exited with status 127" in result.output

    def test_unexpected_failure_exit_code(self):
        """Should still report an error line and exit 1 for unexpected exceptions."""
        broken = MagicMock(side_effect=RuntimeError("boom"))

        result = self.invoke(broken)

        assert result.exit_code == 1
        assert "Error: unexpected RuntimeError: boom" in result.output

    def test_verbosity_from_environment(self, fake_runner):
        """Should stop forwarding command output when PYENV_UPGRADE_VERBOSE is off."""
        with patch.dict("os.environ", {"PYENV_UPGRADE_VERBOSE": "0"}):
            result = self.invoke(fake_runner)

        assert result.exit_code == 0
        assert all(call.args[1].forward_stdout is False for call in fake_runner.call_args_list)


class TestPrompt:
    """Test the yes/no prompt adapter."""

    def test_yes(self):
        """Should return True for an explicit yes."""
        with patch("apps.cli.main.typer.confirm", return_value=True) as mock_confirm:
            assert ask_yes_no("Install 3.9.5?") is True
        mock_confirm.assert_called_once_with("Install 3.9.5?", default=False)

    def test_abort_becomes_prompt_error(self):
        """Should turn an unreadable answer into PromptError."""
        with patch("apps.cli.main.typer.confirm", side_effect=typer.Abort()):
            with pytest.raises(PromptError):
                ask_yes_no("Install 3.9.5?")


def test_format_summary():
    """Should list installs and environment updates."""
    summary = UpgradeSummary(
        installed=[SemanticVersion(3, 9, 5)],
        updated=[
            EnvironmentUpdate(
                local=LocalVersion(False, "a", SemanticVersion(3, 9, 1)),
                target=SemanticVersion(3, 9, 5),
            )
        ],
    )
    assert format_summary(summary) == ["Installed 3.9.5", "Updated a to 3.9.5"]
    assert format_summary(UpgradeSummary()) == ["Nothing upgraded"]
