"""Unittest base class for creating a clean test environment."""
import logging
import os
import unittest
from contextlib import contextmanager
from typing import List

from PySide6 import QtWidgets, QtCore

from ExpenseTrackerMVC.model.model import ExpenseTrackerModel
from ExpenseTrackerMVC.settings import lib


@contextmanager
def mute_ui_signals():
    from ExpenseTrackerMVC.ui.actions import signals
    blocker = QtCore.QSignalBlocker(signals)  # blocks every signal in `signals`
    try:
        yield
    finally:
        del blocker


class RecordingListener:
    """Model listener that records every update it receives."""

    def __init__(self, name: str = 'listener', calls: List[str] = None) -> None:
        self.name = name
        self.calls = calls if calls is not None else []
        self.snapshots = []

    def update(self, model: ExpenseTrackerModel) -> None:
        self.calls.append(self.name)
        self.snapshots.append((model.get_transactions(), model.get_matched_filter_indices()))

    @property
    def update_count(self) -> int:
        return len(self.snapshots)


class BaseTestCase(unittest.TestCase):
    """Base test case that resets the config file and the settings API."""

    def setUp(self) -> None:
        # Ensure headless Qt
        if 'QT_QPA_PLATFORM' not in os.environ:
            os.environ['QT_QPA_PLATFORM'] = 'offscreen'
            logging.debug('QT_QPA_PLATFORM set to offscreen for headless testing.')

        # Ensure a QApplication is available
        if not QtWidgets.QApplication.instance():
            QtWidgets.QApplication([])  # type: ignore
            logging.debug('QtWidgets.QApplication initialized for tests.')

        self._original_settings = lib.settings

        # Start every test from the default template
        config_path = lib.ConfigPaths().config_path
        if config_path.exists():
            config_path.unlink()
            logging.debug(f'Removed config file {config_path}')

        with mute_ui_signals():
            lib.settings = lib.SettingsAPI()

    def tearDown(self) -> None:
        lib.settings = self._original_settings
