"""Reading and writing package manager preferences.

Four places can declare a preference:

- the CLAUDE_PACKAGE_MANAGER environment variable
- the project config file, ``<project>/.claude/package-manager.json``
- the ``packageManager`` field of ``<project>/package.json``
- the global config file, ``~/.claude/package-manager.json``

Every reader fails soft: a missing file, broken JSON or unknown value means
"no signal", never an error.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pkgman.constants import (
    CONFIG_FILENAME,
    CONFIG_KEY,
    ENV_VAR,
    PACKAGE_JSON,
    TOOL_DIR_NAME,
)
from pkgman.exceptions import ConfigWriteError
from pkgman.managers import PackageManager, parse_package_manager
from pkgman.signals import Signal, SignalSource


def _load_json_object(path: Path) -> dict[str, Any] | None:
    """Load a JSON object from disk, or None if that is not possible."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError):
        return None

    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None

    if not isinstance(data, dict):
        return None
    return data


class PreferenceFile:
    """A JSON file holding a single package manager preference.

    Example content:
        {
          "packageManager": "pnpm"
        }
    """

    def __init__(self, path: Path):
        self.path = path

    def __repr__(self) -> str:
        return f"PreferenceFile({str(self.path)!r})"

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> PackageManager | None:
        """Read the stored preference.

        Returns:
            The stored PackageManager, or None if the file is missing,
            malformed, or names an unknown manager
        """
        data = _load_json_object(self.path)
        if data is None:
            return None
        return parse_package_manager(data.get(CONFIG_KEY))

    def write(self, manager: PackageManager) -> None:
        """Store a preference, keeping any other keys already in the file.

        Args:
            manager: The manager to persist

        Raises:
            ConfigWriteError: If the file cannot be written
        """
        data = _load_json_object(self.path) or {}
        data[CONFIG_KEY] = manager.value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(f"Failed to write {self.path}: {e}")

    def clear(self) -> bool:
        """Remove the preference file.

        Returns:
            True if a file was removed, False if there was nothing to remove

        Raises:
            ConfigWriteError: If the file exists but cannot be removed
        """
        if not self.path.exists():
            return False
        try:
            self.path.unlink()
        except OSError as e:
            raise ConfigWriteError(f"Failed to remove {self.path}: {e}")
        return True


def get_project_config_path(project_dir: Path | None = None) -> Path:
    """Get the project-level preference file path."""
    if project_dir is None:
        project_dir = Path.cwd()
    return project_dir / TOOL_DIR_NAME / CONFIG_FILENAME


def get_global_config_path(home_dir: Path | None = None) -> Path:
    """Get the global preference file path (in user home)."""
    if home_dir is None:
        home_dir = Path.home()
    return home_dir / TOOL_DIR_NAME / CONFIG_FILENAME


def read_env(environ: Mapping[str, str]) -> Signal | None:
    """Read the preference from the environment variable."""
    manager = parse_package_manager(environ.get(ENV_VAR))
    if manager is None:
        return None
    return Signal(source=SignalSource.ENV, manager=manager, detail=ENV_VAR)


def read_project_config(project_dir: Path) -> Signal | None:
    """Read the preference from the project config file."""
    path = get_project_config_path(project_dir)
    manager = PreferenceFile(path).read()
    if manager is None:
        return None
    return Signal(source=SignalSource.PROJECT_CONFIG, manager=manager, detail=str(path))


def read_package_json(project_dir: Path) -> Signal | None:
    """Read the ``packageManager`` field from package.json.

    The field normally uses the corepack format, e.g. "pnpm@9.1.0";
    only the name before "@" is consulted.
    """
    path = project_dir / PACKAGE_JSON
    data = _load_json_object(path)
    if data is None:
        return None

    manager = parse_package_manager(data.get(CONFIG_KEY))
    if manager is None:
        return None
    return Signal(source=SignalSource.PACKAGE_JSON, manager=manager, detail=str(path))


def read_global_config(home_dir: Path) -> Signal | None:
    """Read the preference from the global config file."""
    path = get_global_config_path(home_dir)
    manager = PreferenceFile(path).read()
    if manager is None:
        return None
    return Signal(source=SignalSource.GLOBAL_CONFIG, manager=manager, detail=str(path))
