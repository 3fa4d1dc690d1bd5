# modmanager/services/game_service.py
from __future__ import annotations
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Iterable

from modmanager.core.constants import (
    EXECUTABLE_SEARCH_DEPTH,
    GENERIC_CRITICAL_FILES_MESSAGE,
    GENERIC_REQUIRED_TOOL_MESSAGE,
)
from modmanager.models.game_mode_descriptor import GameModeDescriptor
from modmanager.utils.logger_utils import logger

if TYPE_CHECKING:
    from .environment_settings import EnvironmentSettings
    from .game_mode_registry import GameModeRegistry


def _find_child(folder: Path, name: str) -> Path | None:
    """Case-insensitive lookup of a direct child of folder."""
    try:
        for child in folder.iterdir():
            if child.name.lower() == name.lower():
                return child
    except OSError as e:
        logger.warning(f"Cannot list '{folder}': {e}")
    return None


def _subfolders(folder: Path) -> list[Path]:
    try:
        return sorted(child for child in folder.iterdir() if child.is_dir())
    except OSError as e:
        logger.warning(f"Cannot list '{folder}': {e}")
        return []


def _existing_names(folder: Path) -> set[str]:
    """Lower-cased names of the files directly inside folder."""
    if not folder.is_dir():
        return set()
    try:
        return {child.name.lower() for child in folder.iterdir() if child.is_file()}
    except OSError as e:
        logger.warning(f"Cannot list '{folder}': {e}")
        return set()


class GameService:
    """Game-specific checks built on top of a GameModeDescriptor."""

    # --- Executable discovery ---

    def find_executable(self, descriptor: GameModeDescriptor, folder: Path) -> Path | None:
        """Returns the first of the game's candidate executables found in folder."""
        if not folder or not folder.is_dir():
            return None

        for executable_name in descriptor.game_executables:
            candidate = _find_child(folder, executable_name)
            if candidate and candidate.is_file():
                logger.debug(f"Found '{executable_name}' for {descriptor.mode_id} in {folder}")
                return candidate
        return None

    def find_installation_folder(
        self, descriptor: GameModeDescriptor, search_roots: Iterable[Path]
    ) -> Path | None:
        """
        Looks for the game's folder in each search root, checking the root
        itself first and then its subfolders down to EXECUTABLE_SEARCH_DEPTH.
        """
        if not descriptor.game_executables:
            logger.warning(f"Game mode '{descriptor.mode_id}' has no executables to look for.")
            return None

        for root in search_roots:
            root = Path(root)
            if not root.is_dir():
                logger.debug(f"Skipping search root that is not a directory: {root}")
                continue

            level = [root]
            for depth in range(EXECUTABLE_SEARCH_DEPTH + 1):
                for folder in level:
                    if self.find_executable(descriptor, folder):
                        logger.info(f"Detected {descriptor.name} at: {folder}")
                        return folder
                if depth == EXECUTABLE_SEARCH_DEPTH:
                    break
                level = [child for folder in level for child in _subfolders(folder)]

        logger.info(f"No installation of {descriptor.name} found.")
        return None

    def detect_missing_installations(
        self,
        registry: GameModeRegistry,
        settings: EnvironmentSettings,
        search_roots: Iterable[Path],
    ):
        """
        Fills in paths for games without an installation path. Modes that
        derive their installation path only get the executable stored, so
        their resolver stays in charge.
        """
        search_roots = list(search_roots)
        for descriptor in registry:
            if descriptor.installation_path:
                continue
            folder = self.find_installation_folder(descriptor, search_roots)
            if folder is None:
                continue

            if not registry.derives_installation_path(descriptor.mode_id):
                settings.set_installation_path(descriptor.mode_id, str(folder))
            executable = self.find_executable(descriptor, folder)
            if executable is not None and not descriptor.executable_path:
                settings.set_executable_path(descriptor.mode_id, str(executable))

    # --- File classification ---

    def is_plugin_file(self, descriptor: GameModeDescriptor, path: str | Path) -> bool:
        return Path(path).suffix.lower() in descriptor.plugin_extensions

    def find_archive_root(
        self, descriptor: GameModeDescriptor, archive_paths: Iterable[str]
    ) -> str | None:
        """
        Infers which folder inside a mod archive maps onto the game's
        installation folder.

        The shallowest stop folder or plugin file anchors the structure: the
        folder containing it is the root ("" for the archive root). Returns
        None when nothing in the archive matches.
        """
        stop_folders = {name.lower() for name in descriptor.stop_folders}
        best_depth: int | None = None
        best_root: tuple[str, ...] = ()

        for raw_path in archive_paths:
            parts = PurePosixPath(raw_path.replace("\\", "/")).parts
            if not parts:
                continue

            anchor_depth: int | None = None
            for index, part in enumerate(parts[:-1]):
                if part.lower() in stop_folders:
                    anchor_depth = index
                    break
            if anchor_depth is None and self.is_plugin_file(descriptor, parts[-1]):
                anchor_depth = len(parts) - 1

            if anchor_depth is not None and (best_depth is None or anchor_depth < best_depth):
                best_depth = anchor_depth
                best_root = parts[:anchor_depth]

        if best_depth is None:
            logger.debug(f"No stop folder or plugin found for {descriptor.mode_id} archive.")
            return None
        return "/".join(best_root)

    # --- Load order ---

    def sort_plugins_by_load_order(
        self, descriptor: GameModeDescriptor, plugins: Iterable[str]
    ) -> list[str]:
        """
        Critical plugins first, then official plugins, each in the game's
        order; everything else keeps its given order.
        """
        remaining = list(plugins)
        # Indices per lower-cased name, so case variants all move together
        by_lower: dict[str, list[int]] = {}
        for index, name in enumerate(remaining):
            by_lower.setdefault(name.lower(), []).append(index)

        placed: list[int] = []
        for fixed_names in (
            descriptor.ordered_critical_plugin_names,
            descriptor.ordered_official_plugin_names,
        ):
            for name in fixed_names or ():
                placed.extend(by_lower.pop(name.lower(), ()))

        placed_set = set(placed)
        placed.extend(i for i in range(len(remaining)) if i not in placed_set)
        return [remaining[i] for i in placed]

    # --- Critical files & required tool ---

    def find_missing_critical_plugins(self, descriptor: GameModeDescriptor) -> list[str]:
        """
        Critical plugins absent from the plugin directory, in load order.
        Empty when the game has none or its plugin directory is unknown.
        """
        critical = descriptor.ordered_critical_plugin_names
        if not critical:
            return []

        plugin_dir = descriptor.resolve_plugin_directory()
        if plugin_dir is None:
            logger.debug(f"Plugin directory of {descriptor.mode_id} unknown; skipping check.")
            return []

        present = _existing_names(plugin_dir)
        missing = [name for name in critical if name.lower() not in present]
        if missing:
            logger.warning(f"{descriptor.name} is missing critical plugins: {missing}")
        return missing

    def find_missing_required_tool_files(self, descriptor: GameModeDescriptor) -> list[str]:
        """Required tool files absent from the installation folder."""
        file_names = descriptor.ordered_required_tool_file_names
        if not file_names:
            return []

        installation_path = descriptor.installation_path
        if not installation_path:
            logger.debug(f"Installation path of {descriptor.mode_id} unknown; skipping check.")
            return []

        present = _existing_names(Path(installation_path))
        missing = [name for name in file_names if name.lower() not in present]
        if missing:
            logger.warning(
                f"{descriptor.required_tool_name} files missing for {descriptor.name}: {missing}"
            )
        return missing

    def critical_files_message(
        self, descriptor: GameModeDescriptor, missing: Iterable[str]
    ) -> str:
        if descriptor.critical_files_error_message:
            return descriptor.critical_files_error_message
        return GENERIC_CRITICAL_FILES_MESSAGE.format(files=", ".join(missing))

    def required_tool_message(self, descriptor: GameModeDescriptor) -> str | None:
        if not descriptor.has_required_tool:
            return None
        if descriptor.required_tool_error_message:
            return descriptor.required_tool_error_message
        return GENERIC_REQUIRED_TOOL_MESSAGE.format(
            tool=descriptor.required_tool_name, game=descriptor.name
        )
