from .config_service import ConfigService, ConfigSaveError
from .environment_settings import EnvironmentSettings
from .game_mode_registry import GameModeRegistry, DuplicateGameModeError
from .game_service import GameService

__all__ = [
    "ConfigService",
    "ConfigSaveError",
    "EnvironmentSettings",
    "GameModeRegistry",
    "DuplicateGameModeError",
    "GameService",
]
