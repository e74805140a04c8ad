"""Centralized constants for the launcher backend.

Keeps file locations, matching tokens and subprocess timeouts in one place
so the store, scanner and launcher modules agree on them.
"""

# =============================================================================
# PERSISTED STATE LOCATIONS (relative to the user's home directory)
# =============================================================================

# Directory holding apps.json and global.json
CONFIG_DIR_RELATIVE = ".hymetalab/config"

# Registry of user-selected application bundles
APPS_FILE_NAME = "apps.json"

# Global launcher preferences (user name, AI mode, theme)
GLOBAL_CONFIG_FILE_NAME = "global.json"

# Directory of append-only JSON-lines signal files, one per known app
SIGNAL_BUS_DIR_RELATIVE = ".hymetalab/shared/cci-bus"

# =============================================================================
# APPLICATION BUNDLES
# =============================================================================

# Extension of a macOS application bundle directory
APP_BUNDLE_SUFFIX = ".app"

# System-wide install location; the per-user one is ~/Applications
SYSTEM_APPLICATIONS_DIR = "/Applications"

# Directory inside a bundle that holds its executables
BUNDLE_EXECUTABLE_SEGMENT = "/{bundle}.app/contents/macos/"

# Embedded helper process that must not count as the app being open
SIDECAR_MARKER = "/backend-sidecar"

# =============================================================================
# SUBPROCESS
# =============================================================================

# Process table capture: ps -axo command
PROCESS_SNAPSHOT_COMMAND = ["ps", "-axo", "command"]

# Quick local system queries that should complete almost instantly
# Used for: ps
TIMEOUT_SYSTEM_QUICK = 5

# Host mechanism for opening applications
OPEN_COMMAND = "open"

# =============================================================================
# SERIALIZATION
# =============================================================================

# Indentation for apps.json and global.json
JSON_INDENT = 2
