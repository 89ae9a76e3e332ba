"""Package manager detection based on lockfiles."""

from pathlib import Path

from pkgman.managers import PackageManager
from pkgman.signals import Signal, SignalSource

# Scan order. npm's lockfile goes last: it is the one most often left behind
# by a stray `npm install` in a project that uses another manager.
LOCKFILE_SCAN_ORDER: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
)


def find_lockfiles(project_dir: Path) -> list[tuple[Path, PackageManager]]:
    """Find every known lockfile in a directory.

    Only the directory itself is inspected, never subdirectories.

    Args:
        project_dir: Directory to inspect

    Returns:
        (lockfile path, manager) pairs in scan order
    """
    if not project_dir.is_dir():
        return []

    found: list[tuple[Path, PackageManager]] = []
    for filename, manager in LOCKFILE_SCAN_ORDER:
        lockfile = project_dir / filename
        if lockfile.is_file():
            found.append((lockfile, manager))
    return found


def detect_from_lockfile(project_dir: Path) -> Signal | None:
    """Detect the package manager from the first lockfile in scan order.

    A directory holding several stale lockfiles always resolves the same way:
    pnpm-lock.yaml, bun.lockb, bun.lock, yarn.lock, package-lock.json.

    Args:
        project_dir: Directory to inspect

    Returns:
        Lockfile signal, or None if no known lockfile exists

    Examples:
        >>> detect_from_lockfile(Path("./app"))  # app/ has yarn.lock
        Signal(source=<SignalSource.LOCKFILE: 'lockfile'>, manager=<PackageManager.YARN: 'yarn'>, ...)
    """
    found = find_lockfiles(project_dir)
    if not found:
        return None

    lockfile, manager = found[0]
    return Signal(source=SignalSource.LOCKFILE, manager=manager, detail=str(lockfile))
