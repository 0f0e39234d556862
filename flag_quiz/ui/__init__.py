"""Qt UI components for the flag quiz."""

from .dialog_helpers import confirm_restart, show_error, show_info
from .game_main_window import GameMainWindow
from .sound_manager import SoundManager

__all__ = [
    "GameMainWindow",
    "SoundManager",
    "confirm_restart",
    "show_error",
    "show_info",
]
