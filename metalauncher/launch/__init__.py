"""Application launching.

Modules:
    opener: Run `open` for known short names or registered bundle paths
"""

from .opener import (
    launch_app,
    launch_registered_app,
)

__all__ = [
    "launch_app",
    "launch_registered_app",
]
