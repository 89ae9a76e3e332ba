"""Resolve which package manager to use.

Sources are consulted in a fixed order and the first one that names a
manager wins:

1. CLAUDE_PACKAGE_MANAGER environment variable
2. Project config (.claude/package-manager.json)
3. package.json ``packageManager`` field
4. Lockfile in the project directory
5. Global config (~/.claude/package-manager.json)
6. First installed manager, tried as npm, pnpm, yarn, bun

Nothing is cached: every call re-reads the environment and filesystem.
"""

import os
import shutil
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from pkgman.config import (
    read_env,
    read_global_config,
    read_package_json,
    read_project_config,
)
from pkgman.detector import detect_from_lockfile
from pkgman.exceptions import NoPackageManagerFoundError
from pkgman.managers import (
    FALLBACK_ORDER,
    PackageManager,
    WhichFunc,
    get_spec,
)
from pkgman.signals import Signal, SignalSource


@dataclass(frozen=True)
class ResolutionContext:
    """Everything resolution depends on besides file contents."""

    project_dir: Path
    home_dir: Path
    environ: Mapping[str, str] = field(default_factory=dict)
    which: WhichFunc = shutil.which

    @classmethod
    def from_environment(cls, project_dir: Path | None = None) -> "ResolutionContext":
        """Build a context from the running process."""
        return cls(
            project_dir=(project_dir or Path.cwd()).resolve(),
            home_dir=Path.home(),
            environ=dict(os.environ),
            which=shutil.which,
        )


@dataclass(frozen=True)
class ResolvedChoice:
    """The selected package manager and the signal that decided it."""

    manager: PackageManager
    source: SignalSource
    detail: str = ""
    signals: tuple[Signal, ...] = ()

    @property
    def winning_signal(self) -> Signal:
        return Signal(source=self.source, manager=self.manager, detail=self.detail)


def _detect_available(context: ResolutionContext) -> Signal | None:
    """Pick the first installed manager in fallback order."""
    for manager in FALLBACK_ORDER:
        location = context.which(get_spec(manager).binary)
        if location is not None:
            return Signal(source=SignalSource.AVAILABLE, manager=manager, detail=location)
    return None


# Readers in precedence order
_READERS: tuple[Callable[[ResolutionContext], Signal | None], ...] = (
    lambda ctx: read_env(ctx.environ),
    lambda ctx: read_project_config(ctx.project_dir),
    lambda ctx: read_package_json(ctx.project_dir),
    lambda ctx: detect_from_lockfile(ctx.project_dir),
    lambda ctx: read_global_config(ctx.home_dir),
    _detect_available,
)


def collect_signals(context: ResolutionContext) -> list[Signal]:
    """Evaluate every source and return the signals found.

    Args:
        context: Resolution inputs

    Returns:
        All non-absent signals, highest precedence first
    """
    signals: list[Signal] = []
    for reader in _READERS:
        signal = reader(context)
        if signal is not None:
            signals.append(signal)
    return signals


def resolve(context: ResolutionContext | None = None, trace: bool = False) -> ResolvedChoice:
    """Resolve the package manager for a project.

    Args:
        context: Resolution inputs (defaults to the running process)
        trace: Evaluate every source, not just up to the winner, and
            record them on the result

    Returns:
        The resolved choice

    Raises:
        NoPackageManagerFoundError: If no source names a manager and none
            of npm, pnpm, yarn or bun is installed
    """
    if context is None:
        context = ResolutionContext.from_environment()

    if trace:
        signals = collect_signals(context)
        winner = signals[0] if signals else None
    else:
        signals = []
        winner = None
        for reader in _READERS:
            winner = reader(context)
            if winner is not None:
                break

    if winner is None:
        raise NoPackageManagerFoundError(
            "Could not determine package manager: no preference is configured, "
            "no lockfile was found, and none of npm, pnpm, yarn or bun is installed"
        )

    return ResolvedChoice(
        manager=winner.manager,
        source=winner.source,
        detail=winner.detail,
        signals=tuple(signals),
    )
