"""Helper functions for common dialog patterns in the game UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from flag_quiz.constants.ui_constants import CONFIRM_RESTART_MESSAGE, CONFIRM_RESTART_TITLE


def confirm_restart(parent: QWidget) -> bool:
    """Show confirmation dialog for abandoning a game in progress.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        CONFIRM_RESTART_TITLE,
        CONFIRM_RESTART_MESSAGE,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show information dialog."""
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    msg_box.exec()
