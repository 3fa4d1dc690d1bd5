# modmanager/models/game_mode_model.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable

from .theme_model import ModeTheme


def _require_collection(value, field_name: str):
    """A bare string would be split into characters; refuse it."""
    if isinstance(value, str):
        raise TypeError(
            f"{field_name} must be a collection of strings, not a single string: {value!r}"
        )


def _ordered(names: Iterable[str] | None, field_name: str) -> tuple[str, ...] | None:
    """None stays None; anything else becomes a tuple in the given order."""
    if names is None:
        return None
    _require_collection(names, field_name)
    return tuple(names)


@dataclass(frozen=True)
class RequiredTool:
    """
    An external tool a game mode depends on (e.g. a script extender).
    Name and file names always travel together.
    """

    name: str
    file_names: tuple[str, ...]
    error_message: str | None = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Required tool name cannot be empty")
        _require_collection(self.file_names, "file_names")
        object.__setattr__(self, "file_names", tuple(self.file_names))
        if not self.file_names:
            raise ValueError(
                f"Required tool '{self.name}' must list at least one file name"
            )


@dataclass(frozen=True)
class GameModeInfo:
    """
    Static configuration of one supported game. Immutable.

    Optional fields default to "not applicable": None for paths, messages and
    ordered plugin lists, an empty frozenset for extensions and stop folders.
    Ordered lists keep load order exactly as given.
    """

    name: str
    mode_id: str
    game_executables: tuple[str, ...]
    mode_theme: ModeTheme
    plugin_directory: str

    secondary_installation_path: str | None = None
    plugin_extensions: frozenset[str] = field(default_factory=frozenset)
    stop_folders: frozenset[str] = field(default_factory=frozenset)

    ordered_critical_plugin_names: tuple[str, ...] | None = None
    ordered_official_plugin_names: tuple[str, ...] | None = None
    ordered_official_unmanaged_plugin_names: tuple[str, ...] | None = None

    required_tool: RequiredTool | None = None
    critical_files_error_message: str | None = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Game mode name cannot be empty")
        if not self.mode_id:
            raise ValueError(f"Game mode '{self.name}' must have a mode id")

        # Accept lists/sets from callers but store immutable values
        for attr in ("game_executables", "plugin_extensions", "stop_folders"):
            _require_collection(getattr(self, attr), attr)
        object.__setattr__(self, "game_executables", tuple(self.game_executables))
        object.__setattr__(
            self,
            "plugin_extensions",
            frozenset(ext.lower() for ext in self.plugin_extensions),
        )
        object.__setattr__(self, "stop_folders", frozenset(self.stop_folders))
        for attr in (
            "ordered_critical_plugin_names",
            "ordered_official_plugin_names",
            "ordered_official_unmanaged_plugin_names",
        ):
            object.__setattr__(self, attr, _ordered(getattr(self, attr), attr))
