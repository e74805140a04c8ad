"""Utility modules shared by the store, scanners and launcher.

Modules:
    constants: File locations, matching tokens and subprocess timeouts
    errors: LauncherError hierarchy
    locations: Home-relative paths of persisted state
    bundles: .app path validation, canonicalization and bundle names
    path_safety: Traversal-safe joins for table-supplied file names
    known_apps: Loader for data/known-apps.yaml
"""

from .errors import (
    LauncherError,
    InvalidPathError,
    InvalidBundleError,
    NonUtf8PathError,
    EmptyNameError,
    EmptyPathError,
    UnsupportedAppError,
    RegistryReadError,
    RegistryParseError,
    RegistryWriteError,
    RegistrySerializeError,
    LaunchFailedError,
    KnownAppsError,
    PreferencesError,
)

from .bundles import (
    is_app_bundle,
    bundle_name_from_path,
    canonicalize,
    normalize_app_path,
    to_utf8_string,
)

from .path_safety import (
    PathTraversalError,
    safe_join,
    validate_relative_path,
)

from .known_apps import (
    KnownApp,
    get_default_known_apps_path,
    load_known_apps,
    parse_known_apps,
    resolve_short_name,
)

__all__ = [
    # errors
    'LauncherError',
    'InvalidPathError',
    'InvalidBundleError',
    'NonUtf8PathError',
    'EmptyNameError',
    'EmptyPathError',
    'UnsupportedAppError',
    'RegistryReadError',
    'RegistryParseError',
    'RegistryWriteError',
    'RegistrySerializeError',
    'LaunchFailedError',
    'KnownAppsError',
    'PreferencesError',
    # bundles
    'is_app_bundle',
    'bundle_name_from_path',
    'canonicalize',
    'normalize_app_path',
    'to_utf8_string',
    # path_safety
    'PathTraversalError',
    'safe_join',
    'validate_relative_path',
    # known_apps
    'KnownApp',
    'get_default_known_apps_path',
    'load_known_apps',
    'parse_known_apps',
    'resolve_short_name',
]
