"""Persisted launcher state.

Modules:
    models: RegisteredApp, RunningRegisteredApp and dedupe_and_sort
    registry: RegistryStore for ~/.hymetalab/config/apps.json
    preferences: Global preferences in ~/.hymetalab/config/global.json
"""

from .models import (
    RegisteredApp,
    RunningRegisteredApp,
    dedupe_and_sort,
)
from .registry import (
    RegistryStore,
    parse_apps,
    serialize_apps,
)
from .preferences import (
    AI_MODES,
    THEMES,
    Preferences,
    load_preferences,
    save_preferences,
)

__all__ = [
    # models
    'RegisteredApp',
    'RunningRegisteredApp',
    'dedupe_and_sort',
    # registry
    'RegistryStore',
    'parse_apps',
    'serialize_apps',
    # preferences
    'AI_MODES',
    'THEMES',
    'Preferences',
    'load_preferences',
    'save_preferences',
]
