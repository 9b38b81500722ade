"""External command execution."""

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .errors import CommandError

# Undecodable bytes survive as surrogates and encode back unchanged.
OUTPUT_ENCODING = "utf-8"
OUTPUT_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class RunOptions:
    """How a command's output is handled.

    Attributes:
        capture: Keep stdout in memory and return it
        forward_stdout: Echo stdout to the terminal while it is produced
        forward_stderr: Let stderr through to the terminal (it is never captured)
        extra_env: Variables set on top of the inherited environment
    """

    capture: bool = True
    forward_stdout: bool = True
    forward_stderr: bool = True
    extra_env: Mapping[str, str] = field(default_factory=dict)


def decode_output(data: bytes) -> str:
    """Decode command output, keeping undecodable bytes as surrogates."""
    return data.decode(OUTPUT_ENCODING, OUTPUT_ERRORS)


def _forward(line: bytes) -> None:
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(line.decode(OUTPUT_ENCODING, "replace"))
    else:
        sys.stdout.flush()
        buffer.write(line)
        buffer.flush()
    sys.stdout.flush()


def run_command(args: Sequence[str], options: RunOptions | None = None) -> str:
    """Run a command to completion.

    Stdout is read as bytes, so it is forwarded unchanged and captured
    without ever failing to decode.

    Args:
        args: Executable and its arguments
        options: Output and environment handling

    Returns:
        Captured stdout ("" when capture is off), see decode_output

    Raises:
        CommandError: If the command cannot be started or exits nonzero
    """
    options = options or RunOptions()
    env = {**os.environ, **options.extra_env}
    piped = options.capture or options.forward_stdout
    try:
        proc = subprocess.Popen(
            list(args),
            stdout=subprocess.PIPE if piped else subprocess.DEVNULL,
            stderr=None if options.forward_stderr else subprocess.DEVNULL,
            env=env,
        )
    except OSError as e:
        raise CommandError(args, None, str(e)) from e

    chunks: list[bytes] = []
    with proc:
        if proc.stdout is not None:
            for line in proc.stdout:
                if options.forward_stdout:
                    _forward(line)
                if options.capture:
                    chunks.append(line)
        returncode = proc.wait()

    if returncode != 0:
        raise CommandError(args, returncode)
    return decode_output(b"".join(chunks))
