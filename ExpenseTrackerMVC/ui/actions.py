"""Application-wide Qt signals and utility slots for ExpenseTrackerMVC.

This module provides:
    - show_notice: the default user-notice collaborator used by the controller.
    - Signals: custom Qt signals for errors, user notices and configuration changes.
"""
import logging
from typing import Any

from PySide6 import QtCore, QtWidgets

NOTICE_TITLE: str = 'Expense Tracker'


def show_notice(parent: Any, message: str) -> None:
    """Surface a user-visible notice.

    The notice is logged and routed through :attr:`Signals.noticeRequested`, whose
    connected slot displays it in a message box when a QApplication is running.

    Args:
        parent (Any): The requesting view. Used as the dialog parent when it is a QWidget.
        message (str): The message to display.
    """
    logging.warning(f'Notice: {message}')
    signals.noticeRequested.emit(message)

    if isinstance(parent, QtWidgets.QWidget):
        parent.raise_()
        parent.activateWindow()


@QtCore.Slot(str)
def message_box(message: str) -> None:
    """
    Shows the notice in an information message box.
    """
    if not QtWidgets.QApplication.instance():
        logging.debug('No QApplication instance, skipping notice dialog.')
        return

    # Offscreen platforms (tests, CI) cannot block on a modal dialog
    if QtWidgets.QApplication.platformName() == 'offscreen':
        logging.debug('Offscreen platform, skipping notice dialog.')
        return

    QtWidgets.QMessageBox.information(None, NOTICE_TITLE, message)


class Signals(QtCore.QObject):
    """Centralized Qt signals for application config, model and UI events."""
    configSectionChanged = QtCore.Signal(str)

    noticeRequested = QtCore.Signal(str)

    error = QtCore.Signal(str)

    def __init__(self):
        super().__init__()
        self._connect_signals()

    def _connect_signals(self):
        self.noticeRequested.connect(message_box)


signals = Signals()
