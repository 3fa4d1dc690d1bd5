# modmanager/utils/ui_utils.py
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QWidget

from qfluentwidgets import InfoBar, InfoBarPosition, Theme, setTheme, setThemeColor

from modmanager.models.theme_model import ModeTheme

_FLUENT_THEMES = {
    "light": Theme.LIGHT,
    "dark": Theme.DARK,
    "auto": Theme.AUTO,
}


class UiUtils:
    """Static helpers that turn game mode data into Fluent UI state."""

    @staticmethod
    def fluent_theme_for(mode_theme: ModeTheme) -> Theme:
        return _FLUENT_THEMES[mode_theme.appearance]

    @staticmethod
    def apply_mode_theme(mode_theme: ModeTheme):
        """Switches the whole application to the given game mode's branding."""
        setTheme(UiUtils.fluent_theme_for(mode_theme))
        setThemeColor(QColor(mode_theme.primary_color))

    @staticmethod
    def show_toast(
        parent: QWidget,
        message: str,
        level: str = "info",
        title: str | None = None,
        duration: int = 3000,
        position: InfoBarPosition = InfoBarPosition.TOP_RIGHT,
    ):
        """
        Shows a non-blocking InfoBar notification.

        Parameters
        ----------
        parent : QWidget
            The widget over which the toast will be displayed.
        message : str
            The main content of the notification.
        level : str, optional
            'info', 'success', 'warning' or 'error', by default 'info'.
        title : str | None, optional
            Defaults to the capitalized level.
        duration : int, optional
            Milliseconds on screen; warnings and errors stay for 5000.
        position : InfoBarPosition, optional
            Where the toast appears on the parent widget.
        """
        level = level.lower()
        final_title = title if title is not None else level.capitalize()
        final_duration = 5000 if level in ("error", "warning") else duration

        factory = {
            "success": InfoBar.success,
            "warning": InfoBar.warning,
            "error": InfoBar.error,
        }.get(level, InfoBar.info)
        factory(
            final_title,
            message,
            duration=final_duration,
            position=position,
            parent=parent,
        )
