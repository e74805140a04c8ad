"""Launch applications through the macOS `open` command.

Two entry points:
    launch_app: known short name -> `open -a <Bundle Name>`
    launch_registered_app: bundle path -> `open <canonical path>`

`open` is run without a timeout; it returns once Launch Services has
accepted or rejected the request.
"""

import logging
import subprocess
from typing import Optional

from ..utils.bundles import normalize_app_path
from ..utils.constants import OPEN_COMMAND, SYSTEM_APPLICATIONS_DIR
from ..utils.errors import LaunchFailedError, UnsupportedAppError
from ..utils.known_apps import KnownApp, resolve_short_name

logger = logging.getLogger(__name__)


def _run_open(args: list[str]) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            [OPEN_COMMAND, *args],
            capture_output=True,
        )
    except OSError as e:
        raise LaunchFailedError(f"Failed to execute open command: {e}")


def _stderr_text(result: subprocess.CompletedProcess) -> str:
    return result.stderr.decode("utf-8", errors="replace").strip()


def launch_app(short_name: str, known_apps: Optional[dict[str, KnownApp]] = None) -> None:
    """Open one of the known apps by short name.

    Args:
        short_name: Key in the known-apps table, e.g. "companion"
        known_apps: Table to resolve against; defaults to the shipped one

    Raises:
        UnsupportedAppError: If short_name is not a known app
        LaunchFailedError: If open fails or cannot be executed
    """
    app = resolve_short_name(short_name, known_apps)
    if app is None:
        raise UnsupportedAppError(f"Unsupported app name: {short_name}")

    result = _run_open(["-a", app.bundle])
    if result.returncode != 0:
        stderr = _stderr_text(result)
        if stderr:
            raise LaunchFailedError(f"Failed to launch {app.bundle}: {stderr}")
        raise LaunchFailedError(
            f"Failed to launch {app.bundle}. "
            f"Expected app at {SYSTEM_APPLICATIONS_DIR}/{app.bundle}.app"
        )

    logger.info("Launched %s", app.bundle)


def launch_registered_app(path: str) -> None:
    """Open an application bundle by path.

    Raises:
        InvalidPathError, InvalidBundleError, NonUtf8PathError: Bad path
        LaunchFailedError: If open fails or cannot be executed
    """
    normalized_path = normalize_app_path(path)

    result = _run_open([normalized_path])
    if result.returncode != 0:
        stderr = _stderr_text(result)
        if stderr:
            raise LaunchFailedError(f"Failed to launch app at {normalized_path}: {stderr}")
        raise LaunchFailedError(f"Failed to launch app at {normalized_path}")

    logger.info("Launched %s", normalized_path)
