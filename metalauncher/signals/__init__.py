"""Signal bus reading.

Modules:
    bus: Tail per-app JSON-lines signal files
"""

from .bus import (
    Signal,
    parse_signal_from_line,
    read_last_signal_line,
    read_signal_file,
    read_signals,
)

__all__ = [
    "Signal",
    "parse_signal_from_line",
    "read_last_signal_line",
    "read_signal_file",
    "read_signals",
]
