"""Allow running as ``python -m pkgman``."""

from pkgman.cli.main import app

app()
