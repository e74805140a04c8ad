"""Process-table snapshot and app liveness heuristic.

Liveness is decided by substring matching on `ps -axo command` output
rather than by structured process metadata. A process belongs to a bundle
when its command line passes through the bundle's executable directory:

    /<anything>/<Bundle Name>.app/Contents/MacOS/<executable> [args...]

Matching is case-insensitive and not anchored to an install location, so
development builds and relocated installs are detected too. Lines that
mention the embedded helper (/backend-sidecar) never count: the helper may
outlive or precede the app window it serves.

Every batch query uses one snapshot so all answers describe the same
instant.
"""

import logging
import subprocess
from typing import Iterable, Optional

from ..storage.models import RunningRegisteredApp
from ..utils.bundles import bundle_name_from_path
from ..utils.constants import (
    BUNDLE_EXECUTABLE_SEGMENT,
    PROCESS_SNAPSHOT_COMMAND,
    SIDECAR_MARKER,
    TIMEOUT_SYSTEM_QUICK,
)
from ..utils.known_apps import KnownApp

logger = logging.getLogger(__name__)


def read_process_snapshot() -> str:
    """Capture the command line of every running process.

    Returns:
        Newline-separated command lines, or "" if ps is unavailable, fails
        or times out
    """
    try:
        result = subprocess.run(
            PROCESS_SNAPSHOT_COMMAND,
            capture_output=True,
            timeout=TIMEOUT_SYSTEM_QUICK,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as e:
        logger.warning("Process snapshot failed: %s", e)
        return ""

    if result.returncode != 0:
        logger.warning("Process snapshot exited with status %d", result.returncode)
        return ""

    return result.stdout.decode("utf-8", errors="replace")


def is_launchable_process_line(command_line: str, bundle_name: str) -> bool:
    """Check whether one ps line is the app itself (not its sidecar).

    Examples:
        >>> is_launchable_process_line(
        ...     "/Applications/Dugout.app/Contents/MacOS/app", "Dugout")
        True
        >>> is_launchable_process_line(
        ...     "/Applications/Dugout.app/Contents/MacOS/backend-sidecar --port 7001", "Dugout")
        False
    """
    normalized_line = command_line.strip().lower()
    if not normalized_line:
        return False

    bundle_segment = BUNDLE_EXECUTABLE_SEGMENT.format(bundle=bundle_name).lower()
    if bundle_segment not in normalized_line:
        return False

    return SIDECAR_MARKER not in normalized_line


def is_bundle_running(bundle_name: str, snapshot: str) -> bool:
    """True if any line of the snapshot is a launchable process of the bundle."""
    return any(
        is_launchable_process_line(line, bundle_name)
        for line in snapshot.splitlines()
    )


def running_registered_apps(
    paths: Iterable[str],
    snapshot: Optional[str] = None,
) -> list[RunningRegisteredApp]:
    """Report run state for registered bundle paths.

    Args:
        paths: Bundle paths, reported back unchanged and in order
        snapshot: Process snapshot to evaluate; captured once if omitted

    Returns:
        One RunningRegisteredApp per path. Paths without a bundle name are
        reported as not running.
    """
    commands = read_process_snapshot() if snapshot is None else snapshot

    results = []
    for path in paths:
        bundle_name = bundle_name_from_path(path)
        running = bundle_name is not None and is_bundle_running(bundle_name, commands)
        results.append(RunningRegisteredApp(path=path, running=running))
    return results


def running_known_apps(
    known_apps: dict[str, KnownApp],
    snapshot: Optional[str] = None,
) -> dict[str, bool]:
    """Report run state for every known app, keyed by short name."""
    commands = read_process_snapshot() if snapshot is None else snapshot

    return {
        key: is_bundle_running(app.bundle, commands)
        for key, app in known_apps.items()
    }
