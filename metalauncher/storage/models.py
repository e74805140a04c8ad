"""Registry data model and its normalization step."""

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass
class RegisteredApp:
    """A user-selected application bundle.

    ``path`` is the identity key, compared case-insensitively; ``name`` is
    only a display label.
    """

    name: str
    path: str

    def same_path(self, other_path: str) -> bool:
        return self.path.lower() == other_path.lower()

    def to_dict(self) -> dict[str, str]:
        # Field order is the on-disk order
        return {"name": self.name, "path": self.path}

    @classmethod
    def from_dict(cls, data: Any) -> "RegisteredApp":
        """Build an entry from a decoded JSON object.

        Raises:
            ValueError: If data is not an object with string name and path
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        name = data.get("name")
        path = data.get("path")
        if not isinstance(name, str):
            raise ValueError("missing string field 'name'")
        if not isinstance(path, str):
            raise ValueError("missing string field 'path'")
        return cls(name=name, path=path)


@dataclass
class RunningRegisteredApp:
    path: str
    running: bool

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "running": self.running}


def dedupe_and_sort(apps: Iterable[RegisteredApp]) -> list[RegisteredApp]:
    """Collapse same-path entries and order the registry.

    Entries are visited in order. A later entry whose path matches a kept one
    (case-insensitively) replaces it at the kept entry's position. The result
    is then sorted by name, then path, both case-insensitive.

    Args:
        apps: Entries in their original order

    Returns:
        New list of new RegisteredApp objects; the inputs are not mutated
    """
    deduped: list[RegisteredApp] = []
    positions: dict[str, int] = {}

    for app in apps:
        # str.lower() folds non-ASCII letters too, so "/Ärzte.app" matches "/ärzte.app"
        key = app.path.lower()
        copy = RegisteredApp(name=app.name, path=app.path)
        if key in positions:
            deduped[positions[key]] = copy
        else:
            positions[key] = len(deduped)
            deduped.append(copy)

    deduped.sort(key=lambda a: (a.name.lower(), a.path.lower()))
    return deduped
