"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

OPTION_STATE_DEFAULT = "default"
OPTION_STATE_CORRECT = "correct"
OPTION_STATE_WRONG = "wrong"


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QListWidget, QComboBox, QSpinBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_hint_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 13pt; color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};"
            f" color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};"
            " border: none; border-radius: 6px; padding: 8px 18px; font-size: 12pt; }"
        )

    @staticmethod
    def get_option_button_style(state: str = OPTION_STATE_DEFAULT, theme: Theme = Theme.LIGHT) -> str:
        """Option buttons keep their feedback colors while disabled."""
        if state == OPTION_STATE_CORRECT:
            background = ColorPalette.ANSWER_CORRECT.get(theme)
            text = "#FFFFFF"
        elif state == OPTION_STATE_WRONG:
            background = ColorPalette.ANSWER_WRONG.get(theme)
            text = "#FFFFFF"
        else:
            background = ColorPalette.BUTTON_SECONDARY_BG.get(theme)
            text = ColorPalette.TEXT_PRIMARY.get(theme)
        return (
            f"QPushButton, QPushButton:disabled {{ background-color: {background}; color: {text};"
            f" border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};"
            " border-radius: 8px; padding: 12px; font-size: 12pt; }"
        )

    @staticmethod
    def get_flash_style(is_correct: bool | None, theme: Theme = Theme.LIGHT) -> str:
        if is_correct is None:
            background = ColorPalette.BACKGROUND_PRIMARY.get(theme)
        elif is_correct:
            background = ColorPalette.FLASH_CORRECT.get(theme)
        else:
            background = ColorPalette.FLASH_WRONG.get(theme)
        return f"QFrame#flashFrame {{ background-color: {background}; border-radius: 8px; }}"
