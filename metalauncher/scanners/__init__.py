"""Scanner modules for discovering installed and running applications.

Modules:
    applications: Scan /Applications and ~/Applications for .app bundles
    processes: Snapshot the process table and match bundles against it
"""

from . import applications
from . import processes

__all__ = [
    "applications",
    "processes",
]
