"""Scanner for installed application bundles on macOS.

Scans /Applications and ~/Applications (top level only) for .app bundles
the user could add to the registry. Discovery is best-effort: missing or
unreadable directories are skipped and never reported as errors.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..storage.models import RegisteredApp, dedupe_and_sort
from ..utils.bundles import bundle_name_from_path, canonicalize, is_app_bundle, to_utf8_string
from ..utils.locations import applications_dirs

logger = logging.getLogger(__name__)


def collect_apps_from_directory(directory: Path) -> list[RegisteredApp]:
    """Collect the .app bundles directly inside one directory.

    Args:
        directory: Installation root such as /Applications

    Returns:
        One entry per bundle, named after the bundle and keyed by its
        canonical path. Empty if the directory is missing or unreadable.
    """
    apps: list[RegisteredApp] = []

    try:
        if not directory.exists():
            logger.debug("Skipping missing directory %s", directory)
            return apps
        entries = list(directory.iterdir())
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return apps

    for candidate in entries:
        if not is_app_bundle(candidate):
            continue

        path_string = to_utf8_string(canonicalize(candidate))
        if path_string is None:
            logger.debug("Skipping non-UTF-8 path in %s", directory)
            continue

        bundle_name = bundle_name_from_path(path_string)
        if bundle_name is None:
            continue

        apps.append(RegisteredApp(name=bundle_name, path=path_string))

    return apps


def scan(roots: Optional[Iterable[Path]] = None) -> list[RegisteredApp]:
    """Scan for installed applications.

    Args:
        roots: Directories to scan; defaults to /Applications and
            ~/Applications

    Returns:
        Discovered bundles, deduplicated by path and sorted like the registry
    """
    discovered: list[RegisteredApp] = []

    scan_dirs = list(roots) if roots is not None else applications_dirs()
    for scan_dir in scan_dirs:
        discovered.extend(collect_apps_from_directory(Path(scan_dir)))

    apps = dedupe_and_sort(discovered)
    logger.debug("Discovered %d application bundles", len(apps))
    return apps


if __name__ == "__main__":
    import json

    print(json.dumps([app.to_dict() for app in scan()], indent=2))
