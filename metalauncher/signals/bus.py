"""Reader for the CCI signal bus.

Each known app appends status records to its own JSON-lines file under
~/.hymetalab/shared/cci-bus. Only the last non-blank line of a file is of
interest: a later record always supersedes earlier ones.

Record format (extra keys are ignored):
    {"value": 0.82, "timestamp": "2025-01-01T12:00:00Z", "label": "steady"}

Reading is best-effort per file: a missing file, an I/O or decoding error,
or an unparsable last line yields None for that app and does not affect
the others.
"""

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..utils.known_apps import KnownApp
from ..utils.locations import signal_bus_dir
from ..utils.path_safety import PathTraversalError, safe_join

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signal:
    value: float
    timestamp: str
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "timestamp": self.timestamp, "label": self.label}


def read_last_signal_line(file_path: Path) -> Optional[str]:
    """Return the last non-blank line of a file, or None."""
    if not file_path.exists():
        return None

    last_line: Optional[str] = None
    try:
        with open(file_path, encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    last_line = line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read signal file %s: %s", file_path, e)
        return None

    return last_line


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def parse_signal_from_line(line: str) -> Optional[Signal]:
    """Parse one JSON record; None unless value, timestamp and label are valid.

    NaN and infinities are rejected so every Signal re-encodes as strict JSON.
    """
    try:
        parsed = json.loads(line, parse_constant=_reject_constant)
    except ValueError:
        # json.JSONDecodeError is a ValueError
        return None

    if not isinstance(parsed, dict):
        return None

    value = parsed.get("value")
    timestamp = parsed.get("timestamp")
    label = parsed.get("label")

    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not isinstance(timestamp, str) or not isinstance(label, str):
        return None

    try:
        value = float(value)
    except OverflowError:
        return None
    # Out-of-range literals such as 1e400 decode to inf
    if not math.isfinite(value):
        return None

    return Signal(value=value, timestamp=timestamp, label=label)


def read_signal_file(file_path: Path) -> Optional[Signal]:
    last_line = read_last_signal_line(file_path)
    if last_line is None:
        return None
    return parse_signal_from_line(last_line)


def ensure_bus_dir(bus_dir: Path) -> None:
    """Create the bus directory; failures are logged, not raised."""
    try:
        bus_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("Failed to create cci-bus directory %s: %s", bus_dir, e)


def read_signals(
    known_apps: dict[str, KnownApp],
    bus_dir: Optional[Path] = None,
) -> dict[str, Optional[Signal]]:
    """Read the latest signal for every known app.

    Args:
        known_apps: Table of apps whose signal files should be read
        bus_dir: Bus directory; defaults to ~/.hymetalab/shared/cci-bus

    Returns:
        Mapping of short name to its latest Signal, or None
    """
    directory = bus_dir or signal_bus_dir()
    ensure_bus_dir(directory)

    signals: dict[str, Optional[Signal]] = {}
    for key, app in known_apps.items():
        try:
            file_path = safe_join(directory, app.signal_file)
        except PathTraversalError as e:
            logger.warning("Ignoring signal file for %s: %s", key, e)
            signals[key] = None
            continue

        signals[key] = read_signal_file(file_path)

    return signals
