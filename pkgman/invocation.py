"""Build command lines for a resolved package manager."""

import sys

from pkgman.managers import PackageManager, get_spec

# Scripts every manager can run without the "run" keyword
_BUILTIN_SCRIPTS = {"test", "start"}


def is_windows() -> bool:
    return sys.platform == "win32"


def _binary(name: str) -> str:
    """Add the .cmd shim suffix on Windows for Node-installed binaries."""
    if is_windows() and name not in ("bun", "bunx") and not name.endswith(".cmd"):
        return f"{name}.cmd"
    return name


def install_command(manager: PackageManager) -> list[str]:
    """Get the dependency install command.

    Examples:
        >>> install_command(PackageManager.YARN)
        ['yarn']
    """
    spec = get_spec(manager)
    return [_binary(spec.binary), *spec.install_args]


def run_command(manager: PackageManager, script: str, args: list[str] | None = None) -> list[str]:
    """Get the command that runs a package.json script.

    npm needs a "--" separator before arguments meant for the script.

    Examples:
        >>> run_command(PackageManager.NPM, "lint", ["--fix"])
        ['npm', 'run', 'lint', '--', '--fix']
        >>> run_command(PackageManager.PNPM, "test")
        ['pnpm', 'test']
    """
    spec = get_spec(manager)
    cmd = [_binary(spec.binary)]

    if script in _BUILTIN_SCRIPTS and not (manager is PackageManager.BUN and script == "test"):
        cmd.append(script)
    else:
        cmd.extend(["run", script])

    if args:
        if spec.needs_run_separator:
            cmd.append("--")
        cmd.extend(args)
    return cmd


def exec_command(manager: PackageManager, binary: str, args: list[str] | None = None) -> list[str]:
    """Get the command that runs a locally installed package binary.

    Uses local-first runners (npx, pnpm exec, yarn exec, bunx) rather than
    download-and-run variants.

    Examples:
        >>> exec_command(PackageManager.PNPM, "prettier", ["--write", "a.ts"])
        ['pnpm', 'exec', 'prettier', '--write', 'a.ts']
    """
    spec = get_spec(manager)
    return [_binary(spec.exec_binary), *spec.exec_args, binary, *(args or [])]
