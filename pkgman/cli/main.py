"""Main CLI entry point for pkgman."""

from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console

from pkgman import __version__
from pkgman.commands.command import ACTIONS, run_print_command
from pkgman.commands.detect import run_detect
from pkgman.commands.list import run_list
from pkgman.commands.preference import run_set, run_unset

app = typer.Typer(
    name="pkgman",
    help="Detect and configure the Node.js package manager (npm, pnpm, yarn, bun).",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()

ProjectDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--project-dir",
        "-C",
        help="Project directory to inspect (defaults to the current directory).",
        file_okay=False,
    ),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pkgman {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Detect and configure the Node.js package manager."""


def _require_scope(global_install: bool, project: bool) -> None:
    """Exactly one of --global / --project must be given."""
    if global_install == project:
        console.print("[red]Error:[/red] Pass exactly one of --global or --project")
        raise typer.Exit(1)


@app.command()
def detect(
    project_dir: ProjectDirOption = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show every signal that was considered."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as JSON."),
    ] = False,
) -> None:
    """Show which package manager will be used and why.

    Sources, highest precedence first: CLAUDE_PACKAGE_MANAGER, project config,
    package.json packageManager field, lockfile, global config, first
    installed manager.

    Examples:
      pkgman detect
      pkgman detect --verbose
      pkgman detect -C ./frontend --json
    """
    run_detect(project_dir, verbose=verbose, as_json=as_json)


@app.command("set")
def set_(
    name: Annotated[
        str,
        typer.Argument(help="Package manager: npm, pnpm, yarn, or bun.", metavar="NAME"),
    ],
    global_install: Annotated[
        bool,
        typer.Option("--global", "-g", help="Save to ~/.claude/package-manager.json."),
    ] = False,
    project: Annotated[
        bool,
        typer.Option("--project", "-p", help="Save to ./.claude/package-manager.json."),
    ] = False,
    project_dir: ProjectDirOption = None,
) -> None:
    """Save a package manager preference.

    Examples:
      pkgman set pnpm --global
      pkgman set bun --project
    """
    _require_scope(global_install, project)
    run_set(name, global_install, project_dir)


@app.command()
def unset(
    global_install: Annotated[
        bool,
        typer.Option("--global", "-g", help="Remove ~/.claude/package-manager.json."),
    ] = False,
    project: Annotated[
        bool,
        typer.Option("--project", "-p", help="Remove ./.claude/package-manager.json."),
    ] = False,
    project_dir: ProjectDirOption = None,
) -> None:
    """Remove a saved package manager preference."""
    _require_scope(global_install, project)
    run_unset(global_install, project_dir)


@app.command("list")
def list_(project_dir: ProjectDirOption = None) -> None:
    """List supported package managers and which are installed."""
    run_list(project_dir)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def command(
    action: Annotated[
        str,
        typer.Argument(help=f"One of: {', '.join(ACTIONS)}.", metavar="ACTION"),
    ],
    args: Annotated[
        Optional[List[str]],
        typer.Argument(help="Script or binary name, followed by its arguments."),
    ] = None,
    project_dir: ProjectDirOption = None,
) -> None:
    """Print the command line for the resolved package manager.

    Examples:
      pkgman command install
      pkgman command run lint --fix
      pkgman command exec prettier --write src/
      pkgman command exec make -- -C build   # "--" passes -C/--project-dir through
    """
    run_print_command(action, list(args or []), project_dir)


if __name__ == "__main__":
    app()
