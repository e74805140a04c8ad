"""Global launcher preferences (~/.hymetalab/config/global.json).

The document is small and purely cosmetic, so both directions are
best-effort: a missing or broken file loads as None and a failed save
returns False. Neither raises.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..utils.constants import JSON_INDENT
from ..utils.locations import global_config_path

logger = logging.getLogger(__name__)

AI_MODES = ("local", "cloud")
THEMES = ("dark", "light")


@dataclass
class Preferences:
    user_name: str
    ai_mode: str = "local"
    theme: str = "dark"

    def validate(self) -> None:
        """Raises ValueError for values outside the allowed sets."""
        if self.ai_mode not in AI_MODES:
            raise ValueError(f"aiMode must be one of {', '.join(AI_MODES)}: {self.ai_mode}")
        if self.theme not in THEMES:
            raise ValueError(f"theme must be one of {', '.join(THEMES)}: {self.theme}")

    def to_dict(self) -> dict[str, str]:
        return {
            "userName": self.user_name,
            "aiMode": self.ai_mode,
            "theme": self.theme,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Preferences":
        if not isinstance(data, dict):
            raise ValueError("preferences must be a JSON object")

        user_name = data.get("userName")
        ai_mode = data.get("aiMode")
        theme = data.get("theme")
        for field, value in (("userName", user_name), ("aiMode", ai_mode), ("theme", theme)):
            if not isinstance(value, str):
                raise ValueError(f"missing string field '{field}'")

        prefs = cls(user_name=user_name, ai_mode=ai_mode, theme=theme)
        prefs.validate()
        return prefs


def load_preferences(config_path: Optional[Path] = None) -> Optional[Preferences]:
    """Load preferences.

    Args:
        config_path: File to read; defaults to ~/.hymetalab/config/global.json

    Returns:
        Preferences, or None if the file is absent, unreadable or malformed
    """
    path = config_path or global_config_path()
    if not path.exists():
        return None

    try:
        with open(path, encoding="utf-8") as f:
            return Preferences.from_dict(json.load(f))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error("Failed to load config %s: %s", path, e)
        return None


def save_preferences(prefs: Preferences, config_path: Optional[Path] = None) -> bool:
    """Write preferences, creating the config directory if needed.

    Returns:
        True on success, False if the values are invalid or the write failed
    """
    path = config_path or global_config_path()

    try:
        prefs.validate()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(prefs.to_dict(), indent=JSON_INDENT), encoding="utf-8")
    except (OSError, ValueError) as e:
        logger.error("Failed to save config %s: %s", path, e)
        return False

    return True
