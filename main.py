# main.py
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from modmanager.core.constants import APP_NAME, CONFIG_FILE_NAME, LOG_DIR_NAME, ORG_NAME
from modmanager.models.config_model import AppConfig
from modmanager.services import (
    ConfigService,
    ConfigSaveError,
    EnvironmentSettings,
    GameModeRegistry,
    GameService,
)
from modmanager.utils.logger_utils import logger, reconfigure_logger
from modmanager.utils.ui_utils import UiUtils
from modmanager.viewmodels import GameModeViewModel


def main(argv: list[str] | None = None) -> int:
    """
    Entry point. Usage: main.py [mode_id] [search_root ...]

    Loads the per game paths, detects any missing installations under the
    given search roots, then activates mode_id (or the last active mode).
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    app = QApplication(sys.argv[:1])
    app.setOrganizationName(ORG_NAME)
    app.setApplicationName(APP_NAME)

    # --- Composition Root ---
    app_path = Path(".")
    reconfigure_logger(app_path / LOG_DIR_NAME)
    logger.info("Application starting...")

    config_service = ConfigService(app_path / CONFIG_FILE_NAME)
    config = config_service.load_config()

    settings = EnvironmentSettings.from_config(config)
    registry = GameModeRegistry.with_builtin_modes(settings)
    game_service = GameService()
    game_mode_vm = GameModeViewModel(registry, game_service, config_service)

    game_mode_vm.theme_changed.connect(UiUtils.apply_mode_theme)
    game_mode_vm.toast_requested.connect(
        lambda message, level: logger.warning(f"[{level}] {message}")
    )

    requested_mode = argv[0] if argv else config.last_active_mode_id
    search_roots = [Path(p) for p in argv[1:]]

    if search_roots:
        game_service.detect_missing_installations(registry, settings, search_roots)
        installation_paths, executable_paths = settings.snapshot()
        try:
            config_service.save_config(
                AppConfig(
                    installation_paths=installation_paths,
                    executable_paths=executable_paths,
                    last_active_mode_id=config.last_active_mode_id,
                )
            )
        except ConfigSaveError as e:
            logger.critical(f"Failed to save detected game paths: {e}")
            return 1

    for descriptor in registry:
        logger.info(
            f"{descriptor.mode_id:<10} {descriptor.name:<32} "
            f"install={descriptor.installation_path or '-'} "
            f"exe={descriptor.executable_path or '-'}"
        )

    if requested_mode and not game_mode_vm.set_active_mode(requested_mode):
        return 1

    if game_mode_vm.active_mode is not None and not game_mode_vm.active_mode_healthy:
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
