"""pkgman: pick the Node.js package manager a project or user prefers."""

__version__ = "0.3.0"
