"""JSON-backed registry of user-selected application bundles.

The registry file (~/.hymetalab/config/apps.json) is the single source of
truth. RegistryStore keeps no in-memory copy between calls: every mutation
re-reads the file, applies the change, normalizes and writes it back.

File format:
    [
      {
        "name": "Companion",
        "path": "/Applications/Companion.app"
      }
    ]

Loading does not write the normalized form back; an externally edited file
is rewritten in normalized order on the next add or remove.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from ..utils.bundles import bundle_name_from_path, normalize_app_path
from ..utils.constants import JSON_INDENT
from ..utils.errors import (
    EmptyNameError,
    EmptyPathError,
    RegistryParseError,
    RegistryReadError,
    RegistrySerializeError,
    RegistryWriteError,
)
from ..utils.locations import apps_registry_path
from .models import RegisteredApp, dedupe_and_sort

logger = logging.getLogger(__name__)


def serialize_apps(apps: Iterable[RegisteredApp]) -> str:
    """Encode entries as pretty-printed JSON with name before path.

    Raises:
        RegistrySerializeError: If an entry cannot be encoded
    """
    try:
        return json.dumps(
            [app.to_dict() for app in apps],
            indent=JSON_INDENT,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise RegistrySerializeError(f"Failed to serialize app registry: {e}")


def parse_apps(contents: str) -> list[RegisteredApp]:
    """Decode the registry file body without normalizing it.

    Raises:
        RegistryParseError: If contents is not an array of {name, path}
    """
    try:
        data = json.loads(contents)
    except json.JSONDecodeError as e:
        raise RegistryParseError(f"Failed to parse app registry: {e}")

    if not isinstance(data, list):
        raise RegistryParseError("Failed to parse app registry: expected a JSON array")

    apps = []
    for index, item in enumerate(data):
        try:
            apps.append(RegisteredApp.from_dict(item))
        except ValueError as e:
            raise RegistryParseError(f"Failed to parse app registry: entry {index}: {e}")
    return apps


class RegistryStore:
    """Load, save and mutate the persisted app registry.

    Example:
        >>> store = RegistryStore()
        >>> apps = store.add("/Applications/Companion.app")
        >>> [a.name for a in apps]
        ['Companion']
        >>> store.remove("/Applications/Companion.app")
        []
    """

    def __init__(self, registry_path: Optional[Path] = None):
        """Initialize the store.

        Args:
            registry_path: Registry file; defaults to ~/.hymetalab/config/apps.json
        """
        self.registry_path = Path(registry_path) if registry_path else apps_registry_path()

    def load(self) -> list[RegisteredApp]:
        """Read the registry, deduplicated and sorted.

        Returns:
            Registered apps, or [] if the file does not exist

        Raises:
            RegistryReadError: If the file exists but cannot be read
            RegistryParseError: If the file content is malformed
        """
        if not self.registry_path.exists():
            return []

        try:
            contents = self.registry_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RegistryReadError(f"Failed to read app registry: {e}")

        return dedupe_and_sort(parse_apps(contents))

    def save(self, apps: Iterable[RegisteredApp]) -> None:
        """Write entries to the registry file as given.

        Callers pass an already normalized list; see dedupe_and_sort.

        Raises:
            RegistrySerializeError: If the entries cannot be encoded
            RegistryWriteError: If the directory or file cannot be written
        """
        payload = serialize_apps(apps)

        try:
            self.registry_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RegistryWriteError(f"Failed to create app registry directory: {e}")

        try:
            self.registry_path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise RegistryWriteError(f"Failed to write app registry: {e}")

        logger.debug("Wrote %s", self.registry_path)

    def add(self, path: str, name: Optional[str] = None) -> list[RegisteredApp]:
        """Register a bundle, or rename it if its path is already registered.

        Args:
            path: Bundle path; validated and canonicalized before use
            name: Display name; defaults to the bundle name

        Returns:
            The full registry after the change

        Raises:
            InvalidPathError, InvalidBundleError, NonUtf8PathError: Bad path
            EmptyNameError: If the resulting name is blank
            RegistryReadError, RegistryParseError: Existing file is unusable
            RegistryWriteError, RegistrySerializeError: Write failed
        """
        normalized_path = normalize_app_path(path)

        if name is None:
            name = bundle_name_from_path(normalized_path)
            if name is None:
                raise EmptyNameError("Failed to derive app name from path.")

        normalized_name = name.strip()
        if not normalized_name:
            raise EmptyNameError("App name cannot be empty.")

        apps = self.load()
        new_app = RegisteredApp(name=normalized_name, path=normalized_path)

        for index, existing in enumerate(apps):
            if existing.same_path(new_app.path):
                apps[index] = new_app
                break
        else:
            apps.append(new_app)

        sorted_apps = dedupe_and_sort(apps)
        self.save(sorted_apps)
        logger.info("Registered %s at %s", normalized_name, normalized_path)
        return sorted_apps

    def remove(self, path: str) -> list[RegisteredApp]:
        """Unregister every entry whose path matches, ignoring case.

        The path is only trimmed, not validated, so bundles that were deleted
        from disk can still be removed.

        Returns:
            The full registry after the change

        Raises:
            EmptyPathError: If path is blank
            RegistryReadError, RegistryParseError: Existing file is unusable
            RegistryWriteError, RegistrySerializeError: Write failed
        """
        trimmed_path = path.strip()
        if not trimmed_path:
            raise EmptyPathError("App path is required.")

        apps = self.load()
        retained = [app for app in apps if not app.same_path(trimmed_path)]

        sorted_apps = dedupe_and_sort(retained)
        self.save(sorted_apps)
        logger.info("Removed %d entries for %s", len(apps) - len(retained), trimmed_path)
        return sorted_apps
