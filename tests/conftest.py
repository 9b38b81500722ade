"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def sample_local_versions():
    """Sample `pyenv versions` output."""
    return """  system
* 3.9.1 (set by /home/user/.pyenv/version)
  3.9.1/envs/myproj
  3.8.0
  myproj --> /home/user/.pyenv/versions/3.9.1/envs/myproj
"""


@pytest.fixture
def sample_install_list():
    """Sample `pyenv install --list` output."""
    return """Available versions:
  2.7.17
  2.7.18
  3.8.0
  3.9.1
  3.9.5
  3.10-dev
  3.11.0a1
  anaconda3-2021.05
  pypy3.7-7.3.5
"""


@pytest.fixture
def fake_runner():
    """A command runner that records calls and returns canned stdout.

    Outputs are looked up by the full command, e.g.
    ``("pyenv", "install", "--list")``; anything else returns "".
    """
    outputs: dict[tuple[str, ...], str] = {}

    def run(args, options):
        return outputs.get(tuple(args), "")

    runner = MagicMock(side_effect=run)
    runner.outputs = outputs
    return runner
