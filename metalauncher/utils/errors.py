"""Exception types raised by the launcher backend.

Mutating and launching operations raise a ``LauncherError`` subclass whose
message is safe to show to the user as-is. Read paths that are best-effort
(scanning, process snapshots, signal files) never raise these.
"""


class LauncherError(Exception):
    """Base class for all launcher errors."""
    pass


class InvalidPathError(LauncherError):
    """Raised when an application path is empty."""
    pass


class InvalidBundleError(LauncherError):
    """Raised when a path is not an existing .app directory."""
    pass


class NonUtf8PathError(LauncherError):
    """Raised when a canonical path cannot be represented as UTF-8."""
    pass


class EmptyNameError(LauncherError):
    """Raised when a registered app would end up with a blank name."""
    pass


class EmptyPathError(LauncherError):
    """Raised when removal is requested for a blank path."""
    pass


class UnsupportedAppError(LauncherError):
    """Raised when a short name is not in the known-apps table."""
    pass


class RegistryReadError(LauncherError):
    """Raised when apps.json exists but cannot be read."""
    pass


class RegistryParseError(LauncherError):
    """Raised when apps.json is not a JSON array of {name, path} objects."""
    pass


class RegistryWriteError(LauncherError):
    """Raised when apps.json or its directory cannot be written."""
    pass


class RegistrySerializeError(LauncherError):
    """Raised when the registry cannot be encoded as JSON."""
    pass


class LaunchFailedError(LauncherError):
    """Raised when the open command fails or cannot be executed."""
    pass


class KnownAppsError(LauncherError):
    """Raised when the known-apps table is missing or malformed."""
    pass


class PreferencesError(LauncherError):
    """Raised when preferences are invalid or cannot be written."""
    pass
