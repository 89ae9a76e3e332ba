"""Package manager definitions.

This module defines the closed set of supported package managers and
everything pkgman knows about each one: its binary, the lockfiles it writes
and how it spells common commands.
"""

import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pkgman.exceptions import InvalidPackageManagerError

# Signature of shutil.which, injectable for tests
WhichFunc = Callable[[str], str | None]


class PackageManager(Enum):
    """Supported Node.js package managers."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PackageManagerSpec:
    """Static description of one package manager."""

    manager: PackageManager
    binary: str
    lockfiles: tuple[str, ...]
    install_args: tuple[str, ...]
    exec_binary: str  # local-first runner, e.g. "npx"
    exec_args: tuple[str, ...]  # prefix args for the runner, e.g. ("exec",)
    needs_run_separator: bool  # npm needs "--" before extra script args


NPM_SPEC = PackageManagerSpec(
    manager=PackageManager.NPM,
    binary="npm",
    lockfiles=("package-lock.json",),
    install_args=("install",),
    exec_binary="npx",
    exec_args=(),
    needs_run_separator=True,
)

PNPM_SPEC = PackageManagerSpec(
    manager=PackageManager.PNPM,
    binary="pnpm",
    lockfiles=("pnpm-lock.yaml",),
    install_args=("install",),
    exec_binary="pnpm",
    exec_args=("exec",),
    needs_run_separator=False,
)

YARN_SPEC = PackageManagerSpec(
    manager=PackageManager.YARN,
    binary="yarn",
    lockfiles=("yarn.lock",),
    install_args=(),
    exec_binary="yarn",
    exec_args=("exec",),
    needs_run_separator=False,
)

BUN_SPEC = PackageManagerSpec(
    manager=PackageManager.BUN,
    binary="bun",
    lockfiles=("bun.lockb", "bun.lock"),
    install_args=("install",),
    exec_binary="bunx",
    exec_args=(),
    needs_run_separator=False,
)

_SPECS: dict[PackageManager, PackageManagerSpec] = {
    spec.manager: spec for spec in (NPM_SPEC, PNPM_SPEC, YARN_SPEC, BUN_SPEC)
}

# Tie-break order when falling back to whatever is installed
FALLBACK_ORDER: tuple[PackageManager, ...] = (
    PackageManager.NPM,
    PackageManager.PNPM,
    PackageManager.YARN,
    PackageManager.BUN,
)

VALID_NAMES: tuple[str, ...] = tuple(pm.value for pm in PackageManager)


def get_spec(manager: PackageManager) -> PackageManagerSpec:
    """Get the static spec for a package manager."""
    return _SPECS[manager]


def parse_package_manager(raw: Any) -> PackageManager | None:
    """Map a loosely-typed value onto a PackageManager.

    Accepts a bare name ("pnpm") or the corepack form ("pnpm@9.1.0").
    Matching is case-insensitive and ignores surrounding whitespace.

    Args:
        raw: Value read from an env var or a JSON document

    Returns:
        The matching PackageManager, or None if the value is not recognized

    Examples:
        >>> parse_package_manager("yarn@4.1.1")
        <PackageManager.YARN: 'yarn'>
        >>> parse_package_manager("cargo") is None
        True
    """
    if not isinstance(raw, str):
        return None

    name = raw.strip().split("@", 1)[0].strip().lower()
    if not name:
        return None

    try:
        return PackageManager(name)
    except ValueError:
        return None


def is_available(manager: PackageManager, which: WhichFunc | None = None) -> bool:
    """Check if a manager's binary is on PATH."""
    if which is None:
        which = shutil.which
    return which(get_spec(manager).binary) is not None


def get_available_managers(which: WhichFunc | None = None) -> list[PackageManager]:
    """List installed package managers in fallback order.

    Args:
        which: PATH lookup function (defaults to shutil.which)

    Returns:
        Installed managers, ordered npm, pnpm, yarn, bun
    """
    return [pm for pm in FALLBACK_ORDER if is_available(pm, which)]


def require_package_manager(name: str) -> PackageManager:
    """Validate a user-supplied manager name.

    Unlike parse_package_manager, only an exact bare name is accepted
    (case-insensitive): "pnpm@9" is rejected.

    Raises:
        InvalidPackageManagerError: If the name is not npm, pnpm, yarn or bun
    """
    normalized = name.strip().lower()
    if normalized not in VALID_NAMES:
        raise InvalidPackageManagerError(
            f"Unknown package manager '{name}'. Must be one of: {', '.join(VALID_NAMES)}"
        )
    return PackageManager(normalized)
