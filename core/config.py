"""Runtime settings read from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Settings for a pyenv-upgrade run.

    Attributes:
        pyenv: Runtime manager executable
        pip: Package installer executable
        verbose: Forward the stdout of every command to the terminal
    """

    pyenv: str = "pyenv"
    pip: str = "pip"
    verbose: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Load settings, honouring ``PYENV_UPGRADE_*`` overrides.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Settings with defaults for unset variables
        """
        if environ is None:
            environ = os.environ
        verbose = environ.get("PYENV_UPGRADE_VERBOSE", "").strip().lower()
        return cls(
            pyenv=environ.get("PYENV_UPGRADE_PYENV") or cls.pyenv,
            pip=environ.get("PYENV_UPGRADE_PIP") or cls.pip,
            verbose=verbose not in _FALSY,
        )
