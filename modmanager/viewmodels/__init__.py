from .game_mode_vm import GameModeViewModel

__all__ = ["GameModeViewModel"]
