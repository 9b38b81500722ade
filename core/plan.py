"""Upgrade plan computation."""

from collections.abc import Iterable, Mapping

from .models import EnvironmentUpdate, InstallCandidate, LocalVersion, SemanticVersion


def local_latest_versions(locals_: Iterable[LocalVersion]) -> dict[int, SemanticVersion]:
    """Find the newest installed version for each major line.

    Environment records count too; on ties the first record wins.

    Args:
        locals_: Parsed ``pyenv versions`` records

    Returns:
        Mapping of major version to newest local version
    """
    latests: dict[int, SemanticVersion] = {}
    for local in locals_:
        old = latests.get(local.version.major)
        if old is not None and not local.version.is_newer_than(old):
            continue
        latests[local.version.major] = local.version
    return latests


def installable_upgrades(
    local_latests: Mapping[int, SemanticVersion],
    remote_latests: Mapping[int, SemanticVersion],
) -> list[InstallCandidate]:
    """List majors whose newest installable release beats the newest local one.

    Args:
        local_latests: Newest installed version per major
        remote_latests: Newest installable version per major

    Returns:
        Candidates ordered by major version, ascending
    """
    candidates = []
    for major in sorted(local_latests):
        installed = local_latests[major]
        available = remote_latests.get(major)
        if available is not None and available.is_newer_than(installed):
            candidates.append(InstallCandidate(major, installed, available))
    return candidates


def environment_updates(
    locals_: Iterable[LocalVersion],
    local_latests: Mapping[int, SemanticVersion],
) -> list[EnvironmentUpdate]:
    """List named environments built on an older runtime than the local best."""
    updates = []
    for local in locals_:
        if not local.environment_name:
            continue
        latest = local_latests.get(local.version.major)
        if latest is not None and latest.is_newer_than(local.version):
            updates.append(EnvironmentUpdate(local, latest))
    return updates
