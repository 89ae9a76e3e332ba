"""pkgman set / unset command implementations."""

from pathlib import Path

from rich.console import Console

from pkgman.config import PreferenceFile, get_global_config_path, get_project_config_path
from pkgman.exceptions import ConfigWriteError, InvalidPackageManagerError
from pkgman.managers import is_available, require_package_manager

console = Console()


def get_preference_file(global_install: bool, project_dir: Path | None = None) -> PreferenceFile:
    """Get the global or project preference file."""
    if global_install:
        return PreferenceFile(get_global_config_path())
    return PreferenceFile(get_project_config_path(project_dir))


def run_set(name: str, global_install: bool, project_dir: Path | None = None) -> None:
    """Run the set command.

    Validates the manager name first; nothing is written for an unknown name.
    Writing the same name twice leaves the file unchanged.
    """
    try:
        manager = require_package_manager(name)
    except InvalidPackageManagerError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    pref = get_preference_file(global_install, project_dir)
    try:
        pref.write(manager)
    except ConfigWriteError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    scope = "global" if global_install else "project"
    console.print(f"[green]Set {scope} package manager to {manager}[/green]")
    console.print(f"[dim]Saved to {pref.path}[/dim]")

    if not is_available(manager):
        console.print(f"[yellow]Warning: {manager} is not installed or not on PATH[/yellow]")


def run_unset(global_install: bool, project_dir: Path | None = None) -> None:
    """Run the unset command."""
    pref = get_preference_file(global_install, project_dir)
    scope = "global" if global_install else "project"

    try:
        removed = pref.clear()
    except ConfigWriteError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if removed:
        console.print(f"[green]Removed {scope} package manager preference[/green]")
    else:
        console.print(f"[dim]No {scope} package manager preference set[/dim]")
