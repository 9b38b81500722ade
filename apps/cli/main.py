"""CLI application for pyenv-upgrade."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

import typer

from core.config import Settings
from core.console import console, err_console
from core.errors import PromptError, UpgradeError
from core.models import UpgradeSummary
from core.pyenv import PyenvClient
from core.upgrade import Upgrader


def get_version() -> str:
    """Installed distribution version, or "snapshot" for a source checkout."""
    try:
        return package_version("pyenv-upgrade")
    except PackageNotFoundError:
        return "snapshot"


def ask_yes_no(message: str) -> bool:
    """Ask a yes/no question on the terminal.

    Raises:
        PromptError: If stdin is closed or the prompt is interrupted
    """
    try:
        return typer.confirm(message, default=False)
    except typer.Abort as e:
        raise PromptError(f"Cannot read answer to {message!r}") from e


def format_summary(summary: UpgradeSummary) -> list[str]:
    """Format the end-of-run report."""
    if not summary.changed:
        return ["Nothing upgraded"]
    lines = [f"Installed {version}" for version in summary.installed]
    for update in summary.updated:
        lines.append(f"Updated {update.local.environment_name} to {update.target}")
    return lines


def version_callback(value: bool) -> None:
    if value:
        console.print(f"pyenv-upgrade {get_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="pyenv-upgrade",
    help="Upgrade all pyenv-envs",
    add_completion=False,
)


@app.command()
def upgrade(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Upgrade all pyenv-envs: install newer runtimes and re-create environments on them."""
    settings = Settings.from_env()
    upgrader = Upgrader(PyenvClient(settings), confirm=ask_yes_no)

    try:
        summary = upgrader.run()
    except typer.Exit:
        raise
    except UpgradeError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"Error: unexpected {type(e).__name__}: {e}", style="red")
        raise typer.Exit(1)

    for line in format_summary(summary):
        console.print(line)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
