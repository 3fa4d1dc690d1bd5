# modmanager/viewmodels/game_mode_vm.py

from PyQt6.QtCore import QObject, pyqtSignal

from modmanager.core.constants import CONFIG_SECTION_SETTINGS
from modmanager.core.signals import global_signals
from modmanager.models.game_mode_descriptor import GameModeDescriptor
from modmanager.services.config_service import ConfigService, ConfigSaveError
from modmanager.services.game_mode_registry import GameModeRegistry
from modmanager.services.game_service import GameService
from modmanager.utils.logger_utils import logger


class GameModeViewModel(QObject):
    """Tracks the active game mode and reports problems with its installation."""

    # ---Signals for UI ---
    game_mode_list_updated = pyqtSignal(list)  # list[dict]
    active_mode_changed = pyqtSignal(object)  # GameModeDescriptor or None
    theme_changed = pyqtSignal(object)  # ModeTheme
    toast_requested = pyqtSignal(str, str)  # message, level

    def __init__(
        self,
        registry: GameModeRegistry,
        game_service: GameService,
        config_service: ConfigService,
    ):
        super().__init__()

        # ---Injected Services ---
        self.registry = registry
        self.game_service = game_service
        self.config_service = config_service

        # ---Internal State ---
        self.active_mode: GameModeDescriptor | None = None
        self.active_mode_healthy: bool = False

        global_signals.game_mode_paths_changed.connect(self._on_paths_changed)

    # ---Public Methods (API for the View) ---

    def refresh_game_modes(self):
        """Publishes a plain-data summary of every registered game mode."""
        view_data = [
            {
                "mode_id": d.mode_id,
                "name": d.name,
                "installation_path": d.installation_path,
                "is_configured": bool(d.installation_path),
            }
            for d in self.registry
        ]
        self.game_mode_list_updated.emit(view_data)

    def set_active_mode(self, mode_id: str | None, persist: bool = True) -> bool:
        """
        Switches the active game mode. Returns False if mode_id is unknown.
        """
        descriptor = self.registry.get(mode_id)
        if mode_id is not None and descriptor is None:
            logger.warning(f"Unknown game mode requested: '{mode_id}'")
            self.toast_requested.emit(f"Unknown game mode: {mode_id}", "error")
            return False

        if descriptor is self.active_mode:
            return True

        self.active_mode = descriptor
        logger.info(f"Active game mode: {descriptor.name if descriptor else 'None'}")
        self.active_mode_changed.emit(descriptor)
        if descriptor is not None:
            self.theme_changed.emit(descriptor.mode_theme)
            self.verify_active_mode()
        else:
            self.active_mode_healthy = False

        if persist:
            try:
                self.config_service.save_setting(
                    "last_active_mode_id", mode_id, CONFIG_SECTION_SETTINGS
                )
            except ConfigSaveError as e:
                logger.error(f"Could not remember active game mode: {e}")
                self.toast_requested.emit("Could not save the active game.", "warning")
        return True

    def verify_active_mode(self) -> bool:
        """
        Checks critical plugins and the required tool of the active mode,
        requesting a toast for each problem. Returns True when all is well.
        """
        descriptor = self.active_mode
        if descriptor is None:
            return False

        if not descriptor.installation_path:
            self.toast_requested.emit(
                f"Set the installation folder for {descriptor.name} in Settings.", "info"
            )
            self.active_mode_healthy = False
            return False

        healthy = True
        missing_plugins = self.game_service.find_missing_critical_plugins(descriptor)
        if missing_plugins:
            healthy = False
            self.toast_requested.emit(
                self.game_service.critical_files_message(descriptor, missing_plugins),
                "error",
            )

        if self.game_service.find_missing_required_tool_files(descriptor):
            healthy = False
            self.toast_requested.emit(
                self.game_service.required_tool_message(descriptor), "warning"
            )

        self.active_mode_healthy = healthy
        return healthy

    # ---Private Slots ---

    def _on_paths_changed(self, mode_id: str):
        self.refresh_game_modes()
        if self.active_mode is not None and self.active_mode.mode_id == mode_id:
            self.verify_active_mode()
