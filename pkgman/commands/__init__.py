"""Command implementations for the pkgman CLI."""
