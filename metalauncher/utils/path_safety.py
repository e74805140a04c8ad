"""Keep table-supplied file names inside their intended directory.

Signal file names come from the known-apps YAML table. A name such as
"../../.ssh/config" must never make the signal reader open a file outside
the signal bus directory.
"""

from pathlib import Path
from typing import Union


class PathTraversalError(ValueError):
    """Raised when a relative name would escape its base directory."""
    pass


def validate_relative_path(rel_path: Union[str, Path]) -> bool:
    """Check that a path is relative and has no ".." components.

    Examples:
        >>> validate_relative_path("companion-signals.jsonl")
        True
        >>> validate_relative_path("../apps.json")
        False
        >>> validate_relative_path("/etc/passwd")
        False
    """
    path = Path(rel_path)
    if path.is_absolute():
        return False
    return ".." not in path.parts


def safe_join(base: Path, relative: Union[str, Path]) -> Path:
    """Join base and relative, refusing results outside base.

    Args:
        base: Directory the result must stay within
        relative: Relative file name

    Returns:
        The resolved joined path

    Raises:
        PathTraversalError: If relative is unsafe or resolves outside base
    """
    if not validate_relative_path(relative):
        raise PathTraversalError(f"Invalid relative path: {relative}")

    base_resolved = base.resolve()
    dest = (base / relative).resolve()
    try:
        dest.relative_to(base_resolved)
    except ValueError:
        raise PathTraversalError(
            f"Path traversal detected: {relative} escapes {base}"
        )
    return dest
