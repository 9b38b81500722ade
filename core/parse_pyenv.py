"""Parsing of ``pyenv versions`` and ``pyenv install --list`` output."""

import re

from .models import LocalVersion, SemanticVersion

# Bare version numbers only: alpha, dev and flavoured builds are skipped.
INSTALLABLE_RE = re.compile(r"^\s*(\d+)(?:\.(\d+))?(?:\.(\d+))?$", re.ASCII)

LOCAL_RE = re.compile(
    r"^([* ]) (\d+)(?:\.(\d+))?(?:\.(\d+))?(?:/envs/([^ ]+))?(?: \(set by .+\))?$",
    re.ASCII,
)


def parse_installable_line(line: str) -> SemanticVersion | None:
    """Parse one line of ``pyenv install --list``.

    Args:
        line: A single output line

    Returns:
        The version, or None if the line is not a bare version number
    """
    match = INSTALLABLE_RE.match(line)
    if not match:
        return None
    return SemanticVersion.from_parts(*match.groups())


def parse_installable_versions(content: str) -> dict[int, SemanticVersion]:
    """Reduce the installable catalog to the newest version per major."""
    latests: dict[int, SemanticVersion] = {}
    for line in content.splitlines():
        version = parse_installable_line(line)
        if version is None:
            continue
        old = latests.get(version.major)
        if old is not None and not version.is_newer_than(old):
            continue
        latests[version.major] = version
    return latests


def parse_local_line(line: str) -> tuple[LocalVersion, str] | None:
    """Parse one line of ``pyenv versions``.

    Args:
        line: A single output line, e.g. ``"* 3.9.1/envs/web (set by ...)"``

    Returns:
        The record together with the raw major+minor digit string,
        or None if the line does not describe a numbered version
    """
    match = LOCAL_RE.match(line)
    if not match:
        return None
    marker, major, minor, patch, environ = match.groups()
    local = LocalVersion(
        is_current=marker == "*",
        environment_name=environ or "",
        version=SemanticVersion.from_parts(major, minor, patch),
    )
    return local, major + (minor or "")


def parse_local_versions(content: str) -> list[LocalVersion]:
    """Parse ``pyenv versions`` output into records, in listing order.

    A line is dropped when its raw major+minor digits equal the name of an
    environment seen so far (the current line included).
    """
    locals_: list[LocalVersion] = []
    environs: set[str] = set()
    for line in content.splitlines():
        parsed = parse_local_line(line)
        if parsed is None:
            continue
        local, raw_key = parsed
        if local.environment_name:
            environs.add(local.environment_name)
        if raw_key in environs:
            continue
        locals_.append(local)
    return locals_
