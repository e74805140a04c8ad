"""Known applications table.

Loads data/known-apps.yaml, the fixed allowlist of short names the launcher
can open by name, report liveness for and read signals for.

Each entry must provide:
    - bundle: bundle name (file stem of the .app directory)
    - signal_file: plain file name inside the signal bus directory
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import KnownAppsError
from .path_safety import validate_relative_path

logger = logging.getLogger(__name__)

# Cache for the default table to avoid re-reading the YAML on every command
_KNOWN_APPS_CACHE: Optional[dict[str, "KnownApp"]] = None


@dataclass(frozen=True)
class KnownApp:
    key: str
    bundle: str
    signal_file: str


def get_default_known_apps_path() -> Path:
    """Path to the known-apps.yaml shipped with the package."""
    return Path(__file__).parent.parent / "data" / "known-apps.yaml"


def _require_string(entry: dict[str, Any], field: str, key: str) -> str:
    value = entry.get(field)
    if not isinstance(value, str) or not value.strip():
        raise KnownAppsError(f"Known app '{key}' is missing a '{field}' string")
    return value.strip()


def parse_known_apps(data: Any) -> dict[str, KnownApp]:
    """Validate a loaded YAML document and build the table.

    Args:
        data: Result of yaml.safe_load

    Returns:
        Mapping of short name to KnownApp, in file order

    Raises:
        KnownAppsError: If the document is not a mapping of valid entries
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise KnownAppsError("Known apps table must be a mapping of short names")

    table: dict[str, KnownApp] = {}
    for key, entry in data.items():
        if not isinstance(entry, dict):
            raise KnownAppsError(f"Known app '{key}' must be a mapping")

        key = str(key)
        bundle = _require_string(entry, "bundle", key)
        signal_file = _require_string(entry, "signal_file", key)

        if not validate_relative_path(signal_file) or Path(signal_file).name != signal_file:
            raise KnownAppsError(
                f"Known app '{key}' signal_file must be a plain file name: {signal_file}"
            )

        table[key] = KnownApp(key=key, bundle=bundle, signal_file=signal_file)

    return table


def load_known_apps(path: Optional[Path] = None) -> dict[str, KnownApp]:
    """Load the known-apps table.

    The default table is cached after the first load. Passing an explicit
    path always reads that file.

    Raises:
        KnownAppsError: If the file cannot be read or is malformed
    """
    global _KNOWN_APPS_CACHE

    if path is None and _KNOWN_APPS_CACHE is not None:
        return _KNOWN_APPS_CACHE

    table_path = path or get_default_known_apps_path()
    try:
        with open(table_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise KnownAppsError(f"Failed to read known apps table {table_path}: {e}")
    except yaml.YAMLError as e:
        raise KnownAppsError(f"Failed to parse known apps table {table_path}: {e}")

    table = parse_known_apps(data)
    logger.debug("Loaded %d known apps from %s", len(table), table_path)

    if path is None:
        _KNOWN_APPS_CACHE = table
    return table


def resolve_short_name(short_name: str, known_apps: Optional[dict[str, KnownApp]] = None) -> Optional[KnownApp]:
    """Look up a short name such as "companion"; None if unknown."""
    table = known_apps if known_apps is not None else load_known_apps()
    return table.get(short_name)
