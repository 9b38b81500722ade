"""Shared rich consoles."""

from rich.console import Console

# Progress and errors go to stderr so they never mix with forwarded child stdout.
err_console = Console(stderr=True, log_path=False)
console = Console()
