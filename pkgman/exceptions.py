"""Shared exception classes for pkgman."""


class PkgmanError(Exception):
    """Base exception for pkgman errors."""


class NoPackageManagerFoundError(PkgmanError):
    """Raised when no signal names a manager and none is installed."""


class InvalidPackageManagerError(PkgmanError):
    """Raised when a name is not one of npm, pnpm, yarn or bun."""


class ConfigWriteError(PkgmanError):
    """Raised when a preference file cannot be written or removed."""
