"""Errors that abort an upgrade run."""

from collections.abc import Sequence


class UpgradeError(Exception):
    """Base class for every fatal error."""


class CommandError(UpgradeError):
    """An external command could not be run or exited nonzero."""

    def __init__(self, args: Sequence[str], returncode: int | None, reason: str | None = None):
        self.command = list(args)
        self.returncode = returncode
        self.reason = reason
        command_line = " ".join(self.command)
        if returncode is None:
            message = f"failed to run {command_line}: {reason}"
        else:
            message = f"{command_line} exited with status {returncode}"
        super().__init__(message)


class PromptError(UpgradeError):
    """The answer to a yes/no question could not be read."""


class TempFileError(UpgradeError):
    """The dependency list could not be written to a temporary file."""
