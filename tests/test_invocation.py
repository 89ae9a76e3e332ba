"""Tests for command line construction."""

import pytest

from pkgman.invocation import exec_command, install_command, run_command
from pkgman.managers import PackageManager


@pytest.fixture(autouse=True)
def posix(monkeypatch):
    """Build commands as on Linux/macOS unless a test says otherwise."""
    monkeypatch.setattr("pkgman.invocation.is_windows", lambda: False)


class TestInstallCommand:
    """Tests for install_command."""

    @pytest.mark.parametrize(
        "manager,expected",
        [
            (PackageManager.NPM, ["npm", "install"]),
            (PackageManager.PNPM, ["pnpm", "install"]),
            (PackageManager.YARN, ["yarn"]),
            (PackageManager.BUN, ["bun", "install"]),
        ],
    )
    def test_install(self, manager, expected):
        assert install_command(manager) == expected


class TestRunCommand:
    """Tests for run_command."""

    def test_npm_needs_separator(self):
        assert run_command(PackageManager.NPM, "lint", ["--fix"]) == ["npm", "run", "lint", "--", "--fix"]

    def test_pnpm_passes_args_directly(self):
        assert run_command(PackageManager.PNPM, "lint", ["--fix"]) == ["pnpm", "run", "lint", "--fix"]

    def test_no_args_no_separator(self):
        assert run_command(PackageManager.NPM, "build") == ["npm", "run", "build"]

    @pytest.mark.parametrize("manager", [PackageManager.NPM, PackageManager.PNPM, PackageManager.YARN])
    def test_test_shortcut(self, manager):
        assert run_command(manager, "test") == [manager.value, "test"]

    def test_bun_test_runs_the_script(self):
        """`bun test` is bun's own runner, so the script goes through `bun run`."""
        assert run_command(PackageManager.BUN, "test") == ["bun", "run", "test"]

    def test_npm_test_with_args(self):
        assert run_command(PackageManager.NPM, "test", ["--watch"]) == ["npm", "test", "--", "--watch"]


class TestExecCommand:
    """Tests for exec_command."""

    @pytest.mark.parametrize(
        "manager,prefix",
        [
            (PackageManager.NPM, ["npx"]),
            (PackageManager.PNPM, ["pnpm", "exec"]),
            (PackageManager.YARN, ["yarn", "exec"]),
            (PackageManager.BUN, ["bunx"]),
        ],
    )
    def test_local_first_runners(self, manager, prefix):
        assert exec_command(manager, "prettier", ["--write", "a.ts"]) == [*prefix, "prettier", "--write", "a.ts"]


class TestWindows:
    """Node-installed shims get a .cmd suffix on Windows."""

    def test_npx_cmd(self, monkeypatch):
        monkeypatch.setattr("pkgman.invocation.is_windows", lambda: True)

        assert exec_command(PackageManager.NPM, "tsc") == ["npx.cmd", "tsc"]
        assert install_command(PackageManager.PNPM) == ["pnpm.cmd", "install"]

    def test_bun_unchanged(self, monkeypatch):
        monkeypatch.setattr("pkgman.invocation.is_windows", lambda: True)

        assert exec_command(PackageManager.BUN, "tsc") == ["bunx", "tsc"]
