"""Signals: discovered hints about which package manager to use."""

from dataclasses import dataclass
from enum import Enum

from pkgman.managers import PackageManager


class SignalSource(Enum):
    """Where a signal came from, listed in precedence order."""

    ENV = "env"
    PROJECT_CONFIG = "project-config"
    PACKAGE_JSON = "package-json"
    LOCKFILE = "lockfile"
    GLOBAL_CONFIG = "global-config"
    AVAILABLE = "available"

    @property
    def label(self) -> str:
        """Human-readable description for CLI output."""
        return _LABELS[self]


_LABELS = {
    SignalSource.ENV: "environment variable",
    SignalSource.PROJECT_CONFIG: "project config",
    SignalSource.PACKAGE_JSON: "package.json packageManager field",
    SignalSource.LOCKFILE: "lockfile",
    SignalSource.GLOBAL_CONFIG: "global config",
    SignalSource.AVAILABLE: "first installed manager",
}


@dataclass(frozen=True)
class Signal:
    """A single preference hint.

    Attributes:
        source: Which kind of source produced it
        manager: The manager it points at
        detail: Where exactly it was found (env var name, file or binary path)
    """

    source: SignalSource
    manager: PackageManager
    detail: str = ""
