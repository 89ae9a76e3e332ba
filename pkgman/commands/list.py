"""pkgman list command implementation."""

import shutil
from pathlib import Path

from rich.console import Console
from rich.table import Table

from pkgman.exceptions import NoPackageManagerFoundError
from pkgman.managers import FALLBACK_ORDER, get_spec
from pkgman.resolver import ResolutionContext, resolve

console = Console()


def run_list(project_dir: Path | None = None) -> None:
    """Show every supported package manager and whether it is installed."""
    try:
        selected = resolve(ResolutionContext.from_environment(project_dir)).manager
    except NoPackageManagerFoundError:
        selected = None

    table = Table(show_header=True, header_style="bold")
    table.add_column("Manager")
    table.add_column("Installed")
    table.add_column("Binary")
    table.add_column("Lockfiles")

    for manager in FALLBACK_ORDER:
        spec = get_spec(manager)
        location = shutil.which(spec.binary)
        name = f"{manager} [green](selected)[/green]" if manager is selected else str(manager)
        installed = "[green]yes[/green]" if location else "[dim]no[/dim]"
        table.add_row(name, installed, location or "-", ", ".join(spec.lockfiles))

    console.print(table)
