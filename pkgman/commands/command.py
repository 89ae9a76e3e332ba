"""pkgman command command implementation - print a command line."""

import shlex
from pathlib import Path

from rich.console import Console

from pkgman.exceptions import NoPackageManagerFoundError
from pkgman.invocation import exec_command, install_command, run_command
from pkgman.resolver import ResolutionContext, resolve

console = Console()

ACTIONS = ("install", "run", "exec", "test")


def build_command(action: str, args: list[str], project_dir: Path | None = None) -> list[str]:
    """Build the argv for an action using the resolved package manager.

    Raises:
        ValueError: If the action is unknown or missing its target
        NoPackageManagerFoundError: If no package manager can be resolved
    """
    if action not in ACTIONS:
        raise ValueError(f"Unknown action '{action}'. Must be one of: {', '.join(ACTIONS)}")
    if action in ("run", "exec") and not args:
        raise ValueError(f"'{action}' needs a script or binary name")

    manager = resolve(ResolutionContext.from_environment(project_dir)).manager

    if action == "install":
        return install_command(manager)
    if action == "test":
        return run_command(manager, "test", args)
    if action == "run":
        return run_command(manager, args[0], args[1:])
    return exec_command(manager, args[0], args[1:])


def run_print_command(action: str, args: list[str], project_dir: Path | None = None) -> None:
    """Print a shell-quoted command line for the resolved package manager."""
    try:
        argv = build_command(action, args, project_dir)
    except (ValueError, NoPackageManagerFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(shlex.join(argv), markup=False, highlight=False, soft_wrap=True)
