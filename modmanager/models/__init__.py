from .theme_model import ModeTheme, DEFAULT_THEME
from .game_mode_model import GameModeInfo, RequiredTool
from .game_mode_descriptor import (
    GameModeDescriptor,
    PathSettings,
    lookup_installation_path,
)
from .config_model import AppConfig

__all__ = [
    "ModeTheme",
    "DEFAULT_THEME",
    "GameModeInfo",
    "RequiredTool",
    "GameModeDescriptor",
    "PathSettings",
    "lookup_installation_path",
    "AppConfig",
]
