"""Command surface called by the launcher UI.

Every function is synchronous and returns JSON-ready data (lists, dicts,
None). Two result shapes are used:

    Mutating and launching commands raise LauncherError with a message that
    can be shown to the user. The registry is unchanged when they raise.

    Discovery and status commands (scan_installed_apps,
    get_running_registered_apps, read_signals, get_running_apps,
    get_preferences) always succeed and degrade to empty or null values.
"""

from typing import Any, Iterable, Optional

from .launch import opener
from .scanners import applications, processes
from .signals import bus
from .storage.preferences import Preferences, load_preferences
from .storage.preferences import save_preferences as write_preferences
from .storage.registry import RegistryStore
from .utils.errors import PreferencesError
from .utils.known_apps import load_known_apps


def launch_app(short_name: str) -> None:
    opener.launch_app(short_name)


def get_registered_apps() -> list[dict[str, str]]:
    return [app.to_dict() for app in RegistryStore().load()]


def add_registered_app(path: str, name: Optional[str] = None) -> list[dict[str, str]]:
    return [app.to_dict() for app in RegistryStore().add(path, name)]


def remove_registered_app(path: str) -> list[dict[str, str]]:
    return [app.to_dict() for app in RegistryStore().remove(path)]


def scan_installed_apps() -> list[dict[str, str]]:
    return [app.to_dict() for app in applications.scan()]


def launch_registered_app(path: str) -> None:
    opener.launch_registered_app(path)


def get_running_registered_apps(paths: Iterable[str]) -> list[dict[str, Any]]:
    """Run state for each path, evaluated against one process snapshot."""
    return [entry.to_dict() for entry in processes.running_registered_apps(paths)]


def read_signals() -> dict[str, Optional[dict[str, Any]]]:
    """Latest signal per known app, or None where there is none."""
    signals = bus.read_signals(load_known_apps())
    return {
        key: signal.to_dict() if signal is not None else None
        for key, signal in signals.items()
    }


def get_running_apps() -> dict[str, bool]:
    return processes.running_known_apps(load_known_apps())


def get_preferences() -> Optional[dict[str, str]]:
    prefs = load_preferences()
    return prefs.to_dict() if prefs is not None else None


def save_preferences(user_name: str, ai_mode: str = "local", theme: str = "dark") -> dict[str, str]:
    """Persist global preferences and return what was written.

    Raises:
        PreferencesError: If the values are invalid or the file is not writable
    """
    prefs = Preferences(user_name=user_name, ai_mode=ai_mode, theme=theme)
    if not write_preferences(prefs):
        raise PreferencesError("Failed to save preferences; nothing was written.")
    return prefs.to_dict()
