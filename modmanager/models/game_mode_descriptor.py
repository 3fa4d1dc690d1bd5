# modmanager/models/game_mode_descriptor.py
from __future__ import annotations
from pathlib import Path
from typing import Callable, Mapping, Optional, Protocol

from .game_mode_model import GameModeInfo
from .theme_model import ModeTheme


class PathSettings(Protocol):
    """
    The read-only slice of the settings store a descriptor depends on.
    Both mappings are keyed by mode id.
    """

    @property
    def installation_paths(self) -> Mapping[str, str]: ...

    @property
    def executable_paths(self) -> Mapping[str, str]: ...


# Receives the settings provider and the mode id, returns the install path.
InstallationPathResolver = Callable[[PathSettings, str], Optional[str]]


def lookup_installation_path(settings: PathSettings, mode_id: str) -> str | None:
    """The shared installation path strategy: a plain lookup by mode id."""
    return settings.installation_paths.get(mode_id)


class GameModeDescriptor:
    """
    Read-only view of one supported game, combining its static GameModeInfo
    with live lookups against the settings store.

    The two settings-backed values, installation_path and executable_path,
    are read from the store on every access and never cached.
    """

    def __init__(
        self,
        info: GameModeInfo,
        settings: PathSettings,
        installation_path_resolver: InstallationPathResolver | None = None,
    ):
        # --- Injected Dependencies ---
        self._info = info
        self._settings = settings
        self._resolve_installation_path = (
            installation_path_resolver or lookup_installation_path
        )

    # --- Identity ---

    @property
    def info(self) -> GameModeInfo:
        return self._info

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def mode_id(self) -> str:
        return self._info.mode_id

    @property
    def game_executables(self) -> tuple[str, ...]:
        return self._info.game_executables

    # --- Filesystem Layout ---

    @property
    def installation_path(self) -> str | None:
        """Where mod files are installed; None if not configured."""
        return self._resolve_installation_path(self._settings, self.mode_id)

    @property
    def secondary_installation_path(self) -> str | None:
        return self._info.secondary_installation_path

    @property
    def executable_path(self) -> str | None:
        """Path to the game executable; None if not configured."""
        return self._settings.executable_paths.get(self.mode_id)

    @property
    def plugin_directory(self) -> str:
        return self._info.plugin_directory

    def resolve_plugin_directory(self) -> Path | None:
        """
        Returns the plugin directory as a Path. A relative directory is
        anchored at the installation path, so it is None until one is set.
        """
        plugin_dir = Path(self.plugin_directory)
        if plugin_dir.is_absolute():
            return plugin_dir
        installation_path = self.installation_path
        if not installation_path:
            return None
        return Path(installation_path) / plugin_dir

    # --- File Classification ---

    @property
    def plugin_extensions(self) -> frozenset[str]:
        return self._info.plugin_extensions

    @property
    def stop_folders(self) -> frozenset[str]:
        return self._info.stop_folders

    # --- Load Order ---

    @property
    def ordered_critical_plugin_names(self) -> tuple[str, ...] | None:
        return self._info.ordered_critical_plugin_names

    @property
    def ordered_official_plugin_names(self) -> tuple[str, ...] | None:
        return self._info.ordered_official_plugin_names

    @property
    def ordered_official_unmanaged_plugin_names(self) -> tuple[str, ...] | None:
        return self._info.ordered_official_unmanaged_plugin_names

    @property
    def has_critical_plugins(self) -> bool:
        return bool(self.ordered_critical_plugin_names)

    # --- Required Tool ---

    @property
    def required_tool_name(self) -> str | None:
        tool = self._info.required_tool
        return tool.name if tool else None

    @property
    def ordered_required_tool_file_names(self) -> tuple[str, ...] | None:
        tool = self._info.required_tool
        return tool.file_names if tool else None

    @property
    def required_tool_error_message(self) -> str | None:
        tool = self._info.required_tool
        return tool.error_message if tool else None

    @property
    def has_required_tool(self) -> bool:
        return self._info.required_tool is not None

    # --- Presentation ---

    @property
    def mode_theme(self) -> ModeTheme:
        return self._info.mode_theme

    @property
    def critical_files_error_message(self) -> str | None:
        """Custom text for missing critical files; None means use the generic one."""
        return self._info.critical_files_error_message

    # --- Identity semantics ---

    def __eq__(self, other):
        if not isinstance(other, GameModeDescriptor):
            return NotImplemented
        return self.mode_id == other.mode_id

    def __hash__(self):
        return hash(self.mode_id)

    def __repr__(self):
        return f"GameModeDescriptor(mode_id={self.mode_id!r}, name={self.name!r})"
