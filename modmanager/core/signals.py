# modmanager/core/signals.py
from PyQt6.QtCore import QObject, pyqtSignal


class GlobalSignals(QObject):
    """
    A singleton class for application-wide signals.
    Lets the settings store announce changes without knowing who listens.
    """

    # Emitted by EnvironmentSettings whenever an installation or executable
    # path for a game mode is set or cleared.
    # Emits: mode_id (str)
    game_mode_paths_changed = pyqtSignal(str)

    # Used by services to request a UI toast without a ViewModel reference.
    # Emits: message (str), level (str, e.g., 'info', 'warning', 'error')
    toast_requested = pyqtSignal(str, str)


# Create a single, global instance that can be imported anywhere
global_signals = GlobalSignals()
