"""Application bundle path validation and identity.

A bundle's identity in the registry is its canonical absolute path; its
identity in the process table is its bundle name (the path's file stem,
e.g. "Companion" for /Applications/Companion.app).
"""

from pathlib import Path
from typing import Optional, Union

from .constants import APP_BUNDLE_SUFFIX
from .errors import InvalidBundleError, InvalidPathError, NonUtf8PathError


def is_app_bundle(path: Union[str, Path]) -> bool:
    """Check that a path looks like an installed application bundle.

    Args:
        path: Candidate path

    Returns:
        True if the path ends in .app (any case) and is an existing directory;
        False if it cannot be inspected (e.g. permission denied)
    """
    path = Path(path)
    if path.suffix.lower() != APP_BUNDLE_SUFFIX:
        return False
    try:
        return path.is_dir()
    except OSError:
        return False


def bundle_name_from_path(path: Union[str, Path]) -> Optional[str]:
    """Derive the bundle name used to match processes.

    Examples:
        >>> bundle_name_from_path("/Applications/Companion.app")
        'Companion'
        >>> bundle_name_from_path("/Applications/HM Admin Console.app")
        'HM Admin Console'
    """
    stem = Path(path).stem
    return stem or None


def to_utf8_string(path: Path) -> Optional[str]:
    """Return the path as a str, or None if it holds undecodable bytes.

    Undecodable filename bytes survive in a str as lone surrogates, which
    fail to encode back to UTF-8.
    """
    as_string = str(path)
    try:
        as_string.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return as_string


def canonicalize(path: Path) -> Path:
    """Resolve symlinks and relative segments, keeping the input on failure."""
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path


def normalize_app_path(path: str) -> str:
    """Validate a user-supplied bundle path and return its canonical form.

    Args:
        path: Raw path string, possibly with surrounding whitespace

    Returns:
        Canonical absolute path of the bundle

    Raises:
        InvalidPathError: If the path is blank
        InvalidBundleError: If it is not an existing .app directory
        NonUtf8PathError: If the canonical path is not valid UTF-8
    """
    trimmed = path.strip()
    if not trimmed:
        raise InvalidPathError("App path is required.")

    candidate = Path(trimmed)
    if not is_app_bundle(candidate):
        raise InvalidBundleError(
            f"Invalid app bundle path: {trimmed}. Expected an existing .app directory."
        )

    canonical = to_utf8_string(canonicalize(candidate))
    if canonical is None:
        raise NonUtf8PathError("App path must be valid UTF-8.")
    return canonical
