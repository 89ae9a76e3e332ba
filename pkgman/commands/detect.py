"""pkgman detect command implementation."""

import json
from pathlib import Path

from rich.console import Console

from pkgman.constants import ENV_VAR
from pkgman.exceptions import NoPackageManagerFoundError
from pkgman.resolver import ResolutionContext, ResolvedChoice, resolve
from pkgman.signals import SignalSource

console = Console()


def _choice_to_dict(choice: ResolvedChoice) -> dict:
    data = {
        "packageManager": choice.manager.value,
        "source": choice.source.value,
        "detail": choice.detail,
    }
    if choice.signals:
        data["signals"] = [
            {"source": s.source.value, "packageManager": s.manager.value, "detail": s.detail}
            for s in choice.signals
        ]
    return data


def _print_trail(choice: ResolvedChoice) -> None:
    """Print every source in precedence order and what it said."""
    by_source = {signal.source: signal for signal in choice.signals}

    console.print()
    console.print("[bold]Signals (highest precedence first):[/bold]")
    for position, source in enumerate(SignalSource, start=1):
        signal = by_source.get(source)
        if signal is None:
            console.print(f"  [dim]{position}. {source.label}: not set[/dim]")
        elif source is choice.source:
            console.print(f"  [green]{position}. {source.label}: {signal.manager}[/green] [dim]({signal.detail})[/dim]")
        else:
            console.print(f"  {position}. {source.label}: {signal.manager} [dim](overridden)[/dim]")


def run_detect(
    project_dir: Path | None = None,
    verbose: bool = False,
    as_json: bool = False,
) -> ResolvedChoice:
    """Run the detect command.

    Resolves the package manager for the project and prints it together with
    the source that decided it. Never writes anything.
    """
    context = ResolutionContext.from_environment(project_dir)

    try:
        choice = resolve(context, trace=verbose)
    except NoPackageManagerFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print(
            f"[dim]Install one, run 'pkgman set <name> --global', or export {ENV_VAR}[/dim]"
        )
        raise SystemExit(1)

    if as_json:
        console.print(
            json.dumps(_choice_to_dict(choice), indent=2),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return choice

    console.print(f"Package manager: [bold green]{choice.manager}[/bold green]")
    console.print(f"[dim]Source: {choice.source.label} ({choice.detail})[/dim]")

    if verbose:
        _print_trail(choice)

    return choice
