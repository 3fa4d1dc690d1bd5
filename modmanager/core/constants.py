# modmanager/core/constants.py

# --- Application Info ---
APP_NAME: str = "Game Mode Manager"
ORG_NAME: str = "modmanager"
APP_VERSION: str = "0.1.0"
LOGGER_NAME: str = "GameModeManager"

# --- File & Directory Names ---
CONFIG_FILE_NAME: str = "config.json"
LOG_DIR_NAME: str = "logs"
LOG_FILE_PREFIX: str = "LOG_GMM"

# --- config.json sections ---
CONFIG_SECTION_SETTINGS: str = "settings"
CONFIG_SECTION_INSTALLATION_PATHS: str = "installation_paths"
CONFIG_SECTION_EXECUTABLE_PATHS: str = "executable_paths"

# --- Generic user-facing messages ---
# Shown when a game mode does not supply its own text.
GENERIC_CRITICAL_FILES_MESSAGE: str = (
    "The following critical files are missing from the game's plugin "
    "directory: {files}. Please verify the game installation."
)
GENERIC_REQUIRED_TOOL_MESSAGE: str = (
    "{tool} is required to manage mods for {game}, but it could not be found "
    "in the game folder."
)

# --- Theme ---
THEME_APPEARANCES: frozenset[str] = frozenset({"light", "dark", "auto"})
DEFAULT_THEME_COLOR: str = "#0078D4"

# --- Executable discovery ---
# How deep below a search root to look for a game's executable.
EXECUTABLE_SEARCH_DEPTH: int = 1
