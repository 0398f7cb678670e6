"""Test package.

Qt is switched to the offscreen platform and QStandardPaths to test mode before the
application package is imported, so the tests never touch the user's real config directory.
"""
import os

from PySide6 import QtCore

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
QtCore.QStandardPaths.setTestModeEnabled(True)
