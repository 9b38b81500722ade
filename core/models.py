"""Core data models for pyenv-upgrade."""

import re
from dataclasses import dataclass, field

_VERSION_RE = re.compile(r"(\d+)(?:\.(\d+))?(?:\.(\d+))?", re.ASCII)


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A three-part version number; missing parts are zero."""

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Parse ``major[.minor[.patch]]``.

        Args:
            text: The version string

        Returns:
            Parsed SemanticVersion

        Raises:
            ValueError: If text is not a bare version number
        """
        match = _VERSION_RE.fullmatch(text)
        if not match:
            raise ValueError(f"Invalid version: {text!r}")
        return cls.from_parts(*match.groups())

    @classmethod
    def from_parts(
        cls, major: str, minor: str | None = None, patch: str | None = None
    ) -> "SemanticVersion":
        """Build a version from raw digit strings, treating empty parts as zero."""
        return cls(int(major), int(minor or 0), int(patch or 0))

    def is_newer_than(self, other: "SemanticVersion") -> bool:
        return self > other

    def __str__(self) -> str:
        if self.patch > 0:
            return f"{self.major}.{self.minor}.{self.patch}"
        if self.minor > 0:
            return f"{self.major}.{self.minor}"
        return str(self.major)


@dataclass(frozen=True)
class LocalVersion:
    """One line of ``pyenv versions`` output."""

    is_current: bool
    environment_name: str
    version: SemanticVersion

    def __str__(self) -> str:
        return f"{self.version}/envs/{self.environment_name}"


@dataclass(frozen=True)
class InstallCandidate:
    """A newer runtime that can be installed for a major line."""

    major: int
    installed: SemanticVersion
    available: SemanticVersion


@dataclass(frozen=True)
class EnvironmentUpdate:
    """A named environment that can be re-created on a newer runtime."""

    local: LocalVersion
    target: SemanticVersion


@dataclass
class UpgradeSummary:
    """What a run actually did."""

    installed: list[SemanticVersion] = field(default_factory=list)
    updated: list[EnvironmentUpdate] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.installed or self.updated)
