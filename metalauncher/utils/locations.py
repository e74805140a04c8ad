"""Resolve the launcher's persisted-state locations under the home directory."""

from pathlib import Path

from .constants import (
    APPS_FILE_NAME,
    CONFIG_DIR_RELATIVE,
    GLOBAL_CONFIG_FILE_NAME,
    SIGNAL_BUS_DIR_RELATIVE,
    SYSTEM_APPLICATIONS_DIR,
)


def config_dir() -> Path:
    """Directory holding the registry and the preferences file."""
    return Path.home() / CONFIG_DIR_RELATIVE


def apps_registry_path() -> Path:
    return config_dir() / APPS_FILE_NAME


def global_config_path() -> Path:
    return config_dir() / GLOBAL_CONFIG_FILE_NAME


def signal_bus_dir() -> Path:
    return Path.home() / SIGNAL_BUS_DIR_RELATIVE


def applications_dirs() -> list[Path]:
    """Installation roots scanned for bundles, system-wide first.

    Returns:
        [/Applications, ~/Applications]; existence is not checked here.
    """
    return [
        Path(SYSTEM_APPLICATIONS_DIR),
        Path.home() / "Applications",
    ]
