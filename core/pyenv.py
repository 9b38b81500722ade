"""pyenv and pip invocations."""

import tempfile
from collections.abc import Callable, Sequence

from .config import Settings
from .console import err_console
from .errors import TempFileError
from .models import LocalVersion, SemanticVersion
from .parse_pyenv import parse_installable_versions, parse_local_versions
from .runner import OUTPUT_ENCODING, OUTPUT_ERRORS, RunOptions, run_command

Runner = Callable[[Sequence[str], RunOptions], str]


class PyenvClient:
    """Drives pyenv and pip for listing, installing and re-creating environments."""

    def __init__(self, settings: Settings | None = None, runner: Runner = run_command):
        """Initialize the client.

        Args:
            settings: Executables and verbosity
            runner: Command runner (replaced in tests)
        """
        self.settings = settings or Settings()
        self.runner = runner

    def list_local_versions(self) -> list[LocalVersion]:
        err_console.log("Get local versions...")
        output = self._pyenv("versions")
        return parse_local_versions(output)

    def list_installable_versions(self) -> dict[int, SemanticVersion]:
        err_console.log("Get installable versions...")
        output = self._pyenv("install", "--list")
        return parse_installable_versions(output)

    def install(self, version: SemanticVersion) -> None:
        """Install a runtime and upgrade the pip inside it."""
        err_console.log(f"Install a version {version}")
        self._pyenv("install", str(version))
        self._pip("install", "--upgrade", "pip", pyenv_version=str(version))

    def update(self, local: LocalVersion, version: SemanticVersion) -> None:
        """Re-create a named environment on a newer runtime.

        Freezes the environment's packages, removes it, creates it again with
        the same name on ``version`` and reinstalls the frozen packages. Steps
        stop at the first failure; nothing already done is undone.

        Args:
            local: The environment to replace
            version: Runtime for the new environment
        """
        name = local.environment_name
        err_console.log(f"Freezing pip in {local}")
        frozen = self._pip("freeze", pyenv_version=name)
        requirements = put_temp_file(frozen)

        err_console.log(f"Uninstalling {local}")
        self._pyenv("uninstall", "-f", name, pyenv_version="system")

        new_env = LocalVersion(is_current=False, environment_name=name, version=version)
        err_console.log(f"Creating {new_env}")
        self._pyenv("virtualenv", str(version), name, pyenv_version="system")

        err_console.log(f"Unfreezing {new_env}")
        self._pip("install", "-r", requirements, pyenv_version=name)

    def _pyenv(self, *args: str, pyenv_version: str | None = None) -> str:
        return self._run(self.settings.pyenv, args, pyenv_version)

    def _pip(self, *args: str, pyenv_version: str | None = None) -> str:
        return self._run(self.settings.pip, args, pyenv_version)

    def _run(self, exe: str, args: Sequence[str], pyenv_version: str | None) -> str:
        extra_env = {"PYENV_VERSION": pyenv_version} if pyenv_version is not None else {}
        options = RunOptions(forward_stdout=self.settings.verbose, extra_env=extra_env)
        return self.runner([exe, *args], options)


def put_temp_file(body: str) -> str:
    """Write body to a new file in the temp dir and return its path.

    The file is left in place.
    """
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            prefix="pyenv",
            delete=False,
            encoding=OUTPUT_ENCODING,
            errors=OUTPUT_ERRORS,
            newline="",
        ) as tmp:
            tmp.write(body)
    except OSError as e:
        raise TempFileError(f"Cannot write dependency list: {e}") from e
    return tmp.name
