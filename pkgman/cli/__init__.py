"""CLI for pkgman."""
