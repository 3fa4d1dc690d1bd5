# modmanager/services/game_mode_registry.py
from __future__ import annotations
from typing import Iterable, Iterator

from modmanager.core.game_catalog import BUILTIN_GAME_MODES, INSTALLATION_PATH_RESOLVERS
from modmanager.models.game_mode_descriptor import (
    GameModeDescriptor,
    InstallationPathResolver,
    PathSettings,
)
from modmanager.models.game_mode_model import GameModeInfo
from modmanager.utils.logger_utils import logger


class DuplicateGameModeError(ValueError):
    pass


class GameModeRegistry:
    """
    Owns one descriptor per supported game, all sharing the same settings
    provider. Mode ids are unique; registration order is kept.
    """

    def __init__(self, settings: PathSettings):
        # --- Injected Dependencies ---
        self.settings = settings

        # --- Internal State ---
        self._descriptors: dict[str, GameModeDescriptor] = {}
        # Modes whose installation path is computed rather than looked up
        self._derived_installation_paths: set[str] = set()

    @classmethod
    def with_builtin_modes(cls, settings: PathSettings) -> "GameModeRegistry":
        registry = cls(settings)
        registry.register_all(BUILTIN_GAME_MODES, INSTALLATION_PATH_RESOLVERS)
        return registry

    def register(
        self,
        info: GameModeInfo,
        installation_path_resolver: InstallationPathResolver | None = None,
    ) -> GameModeDescriptor:
        """Creates and stores the descriptor for info. Raises on a reused mode id."""
        if info.mode_id in self._descriptors:
            raise DuplicateGameModeError(
                f"Game mode id '{info.mode_id}' is already registered "
                f"by '{self._descriptors[info.mode_id].name}'"
            )

        descriptor = GameModeDescriptor(info, self.settings, installation_path_resolver)
        self._descriptors[info.mode_id] = descriptor
        if installation_path_resolver is not None:
            self._derived_installation_paths.add(info.mode_id)
        logger.debug(f"Registered game mode '{info.mode_id}' ({info.name}).")
        return descriptor

    def register_all(
        self,
        infos: Iterable[GameModeInfo],
        resolvers: dict[str, InstallationPathResolver] | None = None,
    ):
        resolvers = resolvers or {}
        for info in infos:
            self.register(info, resolvers.get(info.mode_id))

    def get(self, mode_id: str | None) -> GameModeDescriptor | None:
        if mode_id is None:
            return None
        return self._descriptors.get(mode_id)

    def derives_installation_path(self, mode_id: str) -> bool:
        return mode_id in self._derived_installation_paths

    def mode_ids(self) -> list[str]:
        return list(self._descriptors)

    def configured_modes(self) -> list[GameModeDescriptor]:
        """Descriptors whose installation path is currently known."""
        return [d for d in self._descriptors.values() if d.installation_path]

    def __contains__(self, mode_id: object) -> bool:
        return mode_id in self._descriptors

    def __iter__(self) -> Iterator[GameModeDescriptor]:
        return iter(list(self._descriptors.values()))

    def __len__(self) -> int:
        return len(self._descriptors)
