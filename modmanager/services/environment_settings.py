# modmanager/services/environment_settings.py
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

from modmanager.core.signals import global_signals
from modmanager.models.config_model import AppConfig
from modmanager.utils.logger_utils import logger


class EnvironmentSettings:
    """
    In-process store for per game mode paths.

    Descriptors read the two mappings through read-only views; only this
    class changes them, announcing every change on
    global_signals.game_mode_paths_changed.
    """

    def __init__(
        self,
        installation_paths: Mapping[str, str] | None = None,
        executable_paths: Mapping[str, str] | None = None,
    ):
        self._installation_paths: dict[str, str] = dict(installation_paths or {})
        self._executable_paths: dict[str, str] = dict(executable_paths or {})

    @classmethod
    def from_config(cls, config: AppConfig) -> "EnvironmentSettings":
        return cls(config.installation_paths, config.executable_paths)

    # --- Read-only views (what descriptors see) ---

    @property
    def installation_paths(self) -> Mapping[str, str]:
        return MappingProxyType(self._installation_paths)

    @property
    def executable_paths(self) -> Mapping[str, str]:
        return MappingProxyType(self._executable_paths)

    # --- Mutation ---

    def set_installation_path(self, mode_id: str, path: str):
        self._set(self._installation_paths, "installation", mode_id, path)

    def set_executable_path(self, mode_id: str, path: str):
        self._set(self._executable_paths, "executable", mode_id, path)

    def clear_installation_path(self, mode_id: str):
        self._clear(self._installation_paths, "installation", mode_id)

    def clear_executable_path(self, mode_id: str):
        self._clear(self._executable_paths, "executable", mode_id)

    def snapshot(self) -> tuple[dict[str, str], dict[str, str]]:
        """Copies of both mappings, for persisting."""
        return dict(self._installation_paths), dict(self._executable_paths)

    def _set(self, target: dict[str, str], kind: str, mode_id: str, path: str):
        if not mode_id:
            raise ValueError("mode_id cannot be empty")
        if target.get(mode_id) == path:
            return
        target[mode_id] = path
        logger.info(f"Set {kind} path for '{mode_id}': {path}")
        global_signals.game_mode_paths_changed.emit(mode_id)

    def _clear(self, target: dict[str, str], kind: str, mode_id: str):
        if target.pop(mode_id, None) is None:
            return
        logger.info(f"Cleared {kind} path for '{mode_id}'.")
        global_signals.game_mode_paths_changed.emit(mode_id)
