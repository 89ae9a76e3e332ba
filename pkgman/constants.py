"""Centralized constants for the pkgman package."""

# Tool directory name - used for .claude/ paths
TOOL_DIR_NAME = ".claude"

# Preference file stored under the tool directory (project or home)
CONFIG_FILENAME = "package-manager.json"

# Key holding the manager name, shared by our config files and package.json
CONFIG_KEY = "packageManager"

# Environment variable that overrides every other signal
ENV_VAR = "CLAUDE_PACKAGE_MANAGER"

PACKAGE_JSON = "package.json"
